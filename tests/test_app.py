import os
import unittest
from unittest.mock import patch

from app import app as flask_app
from dots_core.config import MAX_DIM
from game import h, v, initial_state, line_to_json, place_line, state_to_json


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _move(self, state_json, line):
        return self.client.post("/api/move", json={"state": state_json, "line": line_to_json(line)})

    def test_given_health_when_requested_then_ok(self):
        r = self.client.get("/api/health")
        self.assertEqual(r.status_code, 200)
        self.assertTrue(r.get_json()["ok"])

    def test_given_dimensions_when_new_game_then_fresh_state_and_all_lines_available(self):
        r = self.client.post("/api/new", json={"rows": 2, "cols": 3})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["ok"])
        self.assertEqual(data["state"]["rows"], 2)
        self.assertEqual(data["state"]["cols"], 3)
        self.assertEqual(data["state"]["currentPlayer"], 1)
        self.assertEqual(len(data["available"]), 17)

    def test_given_env_defaults_when_new_game_without_body_then_env_size_used(self):
        with patch.dict(os.environ, {"DOTS_ROWS": "3", "DOTS_COLS": "2"}):
            data = self.client.post("/api/new").get_json()
        self.assertEqual((data["state"]["rows"], data["state"]["cols"]), (3, 2))

    def test_given_bad_dimensions_when_new_game_then_400(self):
        for body in ({"rows": 0, "cols": 2}, {"rows": "x"}):
            r = self.client.post("/api/new", json=body)
            self.assertEqual(r.status_code, 400)
            self.assertFalse(r.get_json()["ok"])

    def test_given_single_box_game_when_played_through_api_then_second_player_wins(self):
        state = self.client.post("/api/new", json={"rows": 1, "cols": 1}).get_json()["state"]
        for line in (h(0, 0), h(1, 0), v(0, 0)):
            data = self._move(state, line).get_json()
            self.assertTrue(data["applied"])
            self.assertEqual(data["boxesCompleted"], 0)
            state = data["state"]
        data = self._move(state, v(0, 1)).get_json()
        self.assertTrue(data["ok"])
        self.assertEqual(data["boxesCompleted"], 1)
        self.assertEqual(data["available"], [])
        final = data["state"]
        self.assertTrue(final["gameOver"])
        self.assertEqual(final["winner"], 2)
        self.assertEqual(final["scores"], [0, 1])
        self.assertEqual(final["boxes"][0][0]["owner"], 2)
        self.assertEqual(final["status"], "Player 2 Wins!")

    def test_given_drawn_line_when_moved_again_then_not_applied_and_state_unchanged(self):
        sj = state_to_json(place_line(initial_state(2, 2), h(1, 1)))
        r = self._move(sj, h(1, 1))
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["ok"])
        self.assertFalse(data["applied"])
        self.assertEqual(data["state"], sj)

    def test_given_off_grid_or_malformed_line_when_moved_then_400(self):
        sj = state_to_json(initial_state(2, 2))
        r = self._move(sj, v(0, 5))
        self.assertEqual(r.status_code, 400)
        self.assertIn("off the grid", r.get_json()["error"])
        r = self.client.post("/api/move", json={"state": sj, "line": {"row": 0}})
        self.assertEqual(r.status_code, 400)
        r = self.client.post("/api/move", json={"line": line_to_json(h(0, 0))})
        self.assertEqual(r.status_code, 400)

    def test_given_tampered_scores_when_moved_then_400(self):
        sj = state_to_json(initial_state(2, 2))
        sj["scores"] = [1, 0]
        r = self._move(sj, h(0, 0))
        self.assertEqual(r.status_code, 400)
        self.assertFalse(r.get_json()["ok"])

    def test_given_non_object_body_when_posted_then_400(self):
        for path in ("/api/new", "/api/reset", "/api/move", "/api/drawn"):
            r = self.client.post(path, json=[1, 2])
            self.assertEqual(r.status_code, 400, path)
            self.assertFalse(r.get_json()["ok"])

    def test_given_malformed_state_fields_when_moved_or_queried_then_400(self):
        line = line_to_json(h(0, 0))
        lines_not_list = dict(state_to_json(initial_state(2, 2)), lines=5)
        boxes_as_dict = dict(state_to_json(initial_state(2, 2)), boxes={"a": 1, "b": 2})
        for path in ("/api/move", "/api/drawn"):
            for sj in (lines_not_list, boxes_as_dict):
                r = self.client.post(path, json={"state": sj, "line": line})
                self.assertEqual(r.status_code, 400, path)
                self.assertFalse(r.get_json()["ok"])

    def test_given_oversized_board_when_requested_then_400(self):
        r = self.client.post("/api/new", json={"rows": 100000, "cols": 100000})
        self.assertEqual(r.status_code, 400)
        r = self.client.post("/api/new", json={"rows": MAX_DIM, "cols": MAX_DIM})
        self.assertEqual(r.status_code, 200)
        big = {"rows": MAX_DIM + 1, "cols": 1}
        r = self.client.post("/api/move", json={"state": big, "line": line_to_json(h(0, 0))})
        self.assertEqual(r.status_code, 400)
        r = self.client.post("/api/reset", json={"state": state_to_json(initial_state(2, 2)), "rows": 10**6})
        self.assertEqual(r.status_code, 400)

    def test_given_non_integer_dimensions_when_new_game_then_400(self):
        for body in ({"rows": 2.7, "cols": 2}, {"rows": True, "cols": 2}):
            r = self.client.post("/api/new", json=body)
            self.assertEqual(r.status_code, 400)

    def test_given_state_when_querying_drawn_then_membership_returned(self):
        sj = state_to_json(place_line(initial_state(2, 2), v(1, 0)))
        r = self.client.post("/api/drawn", json={"state": sj, "line": line_to_json(v(1, 0))})
        self.assertTrue(r.get_json()["drawn"])
        r = self.client.post("/api/drawn", json={"state": sj, "line": line_to_json(h(1, 0))})
        self.assertFalse(r.get_json()["drawn"])

    def test_given_partial_game_when_reset_then_fresh_state_same_size(self):
        s = initial_state(2, 3)
        for line in (h(0, 0), v(0, 0), h(1, 0), v(0, 1)):
            s = place_line(s, line)
        self.assertEqual(s.scores, (0, 1))
        data = self.client.post("/api/reset", json={"state": state_to_json(s)}).get_json()
        fresh = data["state"]
        self.assertEqual((fresh["rows"], fresh["cols"]), (2, 3))
        self.assertEqual(fresh["scores"], [0, 0])
        self.assertEqual(fresh["lines"], [])
        self.assertEqual(fresh["currentPlayer"], 1)
        self.assertFalse(fresh["gameOver"])
        self.assertIsNone(fresh["winner"])

    def test_given_new_size_when_reset_then_board_resized(self):
        sj = state_to_json(initial_state(2, 2))
        data = self.client.post("/api/reset", json={"state": sj, "rows": 5, "cols": 1}).get_json()
        self.assertEqual((data["state"]["rows"], data["state"]["cols"]), (5, 1))


if __name__ == '__main__':
    unittest.main()

"""
Tests for the headless autoplay entry point.
"""
import json
import random

import pytest
from garden_round.config import Settings
from garden_round.game import GardenGame
from garden_round.main import autoplay_step, main, play_round


class TestAutoplay:
    """Tests for the greedy autoplayer."""

    def test_first_step_plants_what_it_can_afford(self):
        game = GardenGame(settings=Settings(), rng=random.Random(0))
        autoplay_step(game)

        assert game.money == 0
        assert len(list(game.grid.iter_occupied())) == 2
        assert all(c.watered for c in game.grid.iter_occupied())

    def test_replanted_cells_are_watered_in_the_same_step(self):
        game = GardenGame(settings=Settings(), rng=random.Random(0))
        autoplay_step(game)
        game.simulate(2000)

        autoplay_step(game)
        occupied = list(game.grid.iter_occupied())
        assert occupied
        assert all(c.watered and c.planted_at == game.now for c in occupied)

    def test_play_round_finishes(self):
        game = GardenGame(settings=Settings(), rng=random.Random(5))
        final = play_round(game, 100)

        assert game.ended
        assert final == game.money
        assert final > 50


class TestMain:
    """Tests for the CLI."""

    def test_json_output(self, capsys):
        assert main(["--seed", "3", "--name", "Robo", "--json", "--log-level", "WARNING"]) == 0

        snapshot = json.loads(capsys.readouterr().out)
        assert snapshot["ended"]
        assert snapshot["leaderboard"][0]["name"] == "Robo"
        assert snapshot["leaderboard"][0]["score"] == snapshot["money"]

    def test_text_output(self, capsys):
        assert main(["--seed", "3", "--tick-ms", "250", "--log-level", "WARNING"]) == 0
        out = capsys.readouterr().out
        assert "Final money" in out
        assert "#1 Autoplayer" in out

    def test_rejects_bad_tick(self):
        with pytest.raises(SystemExit):
            main(["--tick-ms", "0"])

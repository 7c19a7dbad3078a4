"""Tests for the turn engine state machine and scoring."""

import numpy as np
import pytest
from structlog.testing import capture_logs

from conftest import FixedRng, create_engine, play_out
from guess_the_number.game import (
    GameConfig,
    GameNotFinishedError,
    GameOverError,
    InvalidGuessFormat,
    Phase,
    TurnEngine,
    TurnNotStartedError,
    parse_guess,
)


class TestParseGuess:
    @pytest.mark.parametrize("raw, expected", [("3", 3), (" 42\n", 42), ("-1", -1), (7, 7)])
    def test_reads_whole_numbers(self, raw, expected):
        assert parse_guess(raw) == expected

    @pytest.mark.parametrize("raw", ["", "three", "2.5", "1e3", "1_0", "+-1", True])
    def test_rejects_everything_else(self, raw):
        with pytest.raises(InvalidGuessFormat):
            parse_guess(raw)


class TestStartTurn:
    def test_engine_waits_for_first_turn(self):
        engine = create_engine(start=False)
        assert engine.state.phase is Phase.AWAITING_SETUP
        assert engine.state.secret_number is None

    def test_draws_secret_from_inclusive_range(self):
        rng = FixedRng(5)
        engine = TurnEngine(GameConfig(["Alice"], 1, max_number=5), rng)

        engine.start_turn()

        assert engine.state.secret_number == 5
        assert rng.calls == [(1, 5, True)]
        assert engine.state.phase is Phase.TURN_IN_PROGRESS

    def test_each_turn_draws_a_new_secret(self):
        engine = create_engine(names=("Alice",), total_rounds=3, secrets=(1, 2, 3))

        secrets = [engine.state.secret_number]
        for _ in range(2):
            engine.submit_guess("9")
            secrets.append(engine.state.secret_number)

        assert secrets == [1, 2, 3]
        assert len(engine.rng.calls) == 3

    def test_seeded_generator_stays_in_range(self):
        config = GameConfig(["Alice", "Bob"], 50, max_number=10)
        engine = TurnEngine(config, np.random.default_rng(seed=3))
        engine.start_turn()

        while not engine.finished:
            assert 1 <= engine.state.secret_number <= 10
            engine.submit_guess("0")

    def test_view_shows_turn_without_the_secret(self, engine):
        view = engine.view()

        assert view.round_number == 1
        assert view.total_rounds == 1
        assert view.player_index == 0
        assert view.player_name == "Alice"
        assert view.max_number == 5
        assert view.scores == (("Alice", 0), ("Bob", 0))
        assert not hasattr(view, "secret_number")

    def test_secret_is_hidden_from_state_repr(self, engine):
        assert "secret" not in repr(engine.state)


class TestSubmitGuess:
    def test_correct_guess_adds_five(self, engine):
        result = engine.submit_guess("3")

        assert result.correct
        assert result.points == 5
        assert result.score == 5
        assert result.secret_number == 3
        assert engine.players[0].score == 5

    def test_wrong_guess_subtracts_three(self, engine):
        result = engine.submit_guess("4")

        assert not result.correct
        assert result.points == -3
        assert result.score == -3
        assert result.secret_number == 3
        assert engine.players[0].score == -3

    def test_out_of_range_guess_is_wrong(self, engine):
        assert not engine.submit_guess("1000").correct

    def test_scores_can_go_negative_over_many_turns(self):
        engine = create_engine(names=("Alice",), total_rounds=3)
        play_out(engine, ["1", "1", "1"])
        assert engine.players[0].score == -9

    def test_invalid_guess_changes_nothing(self, engine):
        before = (engine.state.current_round, engine.state.current_player_index)

        with pytest.raises(InvalidGuessFormat):
            engine.submit_guess("abc")

        assert (engine.state.current_round, engine.state.current_player_index) == before
        assert engine.state.secret_number == 3
        assert engine.players[0].score == 0
        assert len(engine.rng.calls) == 1

    def test_digit_separators_are_not_a_guess(self):
        engine = create_engine(max_number=100000, secrets=(10,))

        with pytest.raises(InvalidGuessFormat):
            engine.submit_guess("1_0")

        assert engine.players[0].score == 0
        assert engine.state.current_player_index == 0

    def test_same_player_guesses_again_after_invalid_input(self, engine):
        with pytest.raises(InvalidGuessFormat):
            engine.submit_guess("")

        result = engine.submit_guess("3")
        assert result.player_name == "Alice"

    def test_guess_before_first_turn_is_rejected(self):
        engine = create_engine(start=False)
        with pytest.raises(TurnNotStartedError):
            engine.submit_guess("3")

    def test_result_message(self, engine):
        assert engine.submit_guess("3").message == (
            "CORRECT! The number was 3.\nYou earned 5 points!"
        )
        assert engine.submit_guess("1").message == (
            "WRONG! The number was 3.\nYou lost 3 points."
        )


class TestAdvanceTurn:
    def test_turn_passes_to_next_player(self, engine):
        result = engine.submit_guess("1")

        assert result.player_name == "Alice"
        assert engine.state.current_player_index == 1
        assert engine.current_player.name == "Bob"
        assert engine.state.current_round == 1

    def test_round_wraps_after_every_player_guessed(self):
        engine = create_engine(names=("A", "B", "C"), total_rounds=3)

        play_out(engine, ["1", "1", "1"])

        assert engine.state.current_round == 2
        assert engine.state.current_player_index == 0
        assert not engine.finished

    def test_game_ends_after_all_rounds(self):
        engine = create_engine(names=("A", "B"), total_rounds=2)

        results = play_out(engine, ["1"] * 4)

        assert engine.finished
        assert [result.game_over for result in results] == [False, False, False, True]
        assert engine.state.phase is Phase.GAME_OVER
        assert engine.state.secret_number is None
        assert engine.standings is not None

    def test_single_player_single_round(self):
        engine = create_engine(names=("Solo",), total_rounds=1)
        engine.submit_guess("3")
        assert engine.finished
        assert engine.standings.winner == "Solo"

    def test_no_turn_operations_after_game_over(self, engine):
        play_out(engine, ["3", "1"])

        with pytest.raises(GameOverError):
            engine.start_turn()
        with pytest.raises(GameOverError):
            engine.submit_guess("3")
        with pytest.raises(GameOverError):
            engine.advance_turn()

    def test_game_over_error_is_a_runtime_error(self, engine):
        play_out(engine, ["3", "1"])
        with pytest.raises(RuntimeError):
            engine.start_turn()


class TestStandings:
    def _finish_with_scores(self, scores):
        engine = create_engine(names=[f"P{i}" for i in range(len(scores))], start=False)
        for player, score in zip(engine.players, scores):
            player.score = score
        engine.state.current_player_index = len(scores) - 1
        engine.advance_turn()
        return engine

    def test_not_available_before_game_over(self, engine):
        with pytest.raises(GameNotFinishedError):
            engine.compute_standings()
        assert engine.standings is None

    def test_sole_winner(self):
        standings = self._finish_with_scores([5, -3]).compute_standings()

        assert not standings.is_tie
        assert standings.winner == "P0"
        assert standings.top_score == 5

    def test_tie_between_first_two(self):
        standings = self._finish_with_scores([10, 10, 5]).compute_standings()

        assert standings.is_tie
        assert standings.winner is None
        assert standings.winners == ["P0", "P1"]

    def test_tie_split_by_a_lower_score(self):
        standings = self._finish_with_scores([10, 5, 10]).compute_standings()

        assert standings.is_tie
        assert standings.winner_indices == (0, 2)
        assert standings.winners == ["P0", "P2"]

    def test_later_higher_score_beats_earlier_tie(self):
        standings = self._finish_with_scores([5, 5, 10]).compute_standings()

        assert not standings.is_tie
        assert standings.winner == "P2"

    def test_game_over_event_keeps_players_sharing_a_name(self):
        engine = create_engine(names=("Sam", "Sam"))

        with capture_logs() as logs:
            play_out(engine, ["3", "1"])

        game_over = [log for log in logs if log["event"] == "game over"]
        assert len(game_over) == 1
        assert game_over[0]["scores"] == [("Sam", 5), ("Sam", -3)]
        assert game_over[0]["top_score"] == 5

    def test_cached_standings_match_computed(self):
        engine = self._finish_with_scores([10, 5, 10])
        assert engine.standings == engine.compute_standings()


class TestExampleGame:
    def test_alice_beats_bob(self):
        engine = create_engine(names=("Alice", "Bob"), total_rounds=1, max_number=5, secrets=(3,))

        alice = engine.submit_guess("3")
        assert alice.player_name == "Alice"
        assert alice.score == 5

        bob = engine.submit_guess("1")
        assert bob.player_name == "Bob"
        assert bob.score == -3

        assert engine.finished
        standings = engine.standings
        assert standings.scores == (("Alice", 5), ("Bob", -3))
        assert standings.winner == "Alice"
        assert standings.top_score == 5
        assert standings.summary().endswith("Congratulations, Alice wins!")

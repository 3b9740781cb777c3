"""Scenario tests for the turn engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from lifetune_backend.game_logic import (
    GAME_CARDS,
    Card,
    Deck,
    GameRules,
    SessionStorageError,
    SessionValidationError,
    TurnEngine,
)
from lifetune_backend.shared import (
    CardEffect,
    CardType,
    DeterministicRandomService,
    GameStatus,
    JobId,
    LogTone,
    TurnPhase,
)

if TYPE_CHECKING:
    from lifetune_backend.game_logic import GameView

BLUE = JobId.BLUE
WHITE = JobId.WHITE


def card_titled(title: str) -> Card:
    return next(card for card in GAME_CARDS if card.title == title)


def play_quiet_turn(engine: TurnEngine, *, pay: bool = True) -> None:
    """Collect, settle the premium, draw and end the turn."""
    engine.collect()
    engine.resolve_premium(pay=pay)
    engine.draw_card()
    engine.end_turn()


def messages(view: GameView, tone: LogTone | None = None) -> list[str]:
    return [
        entry.message
        for entry in view.recent_log
        if tone is None or entry.tone is tone
    ]


class _FailingArchive:
    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    def create_session(self, payload):
        self.calls += 1
        raise self.error

    def list_sessions(self, limit: int = 10):
        return []


@pytest.mark.parametrize(
    "jobs",
    [
        [BLUE, WHITE],
        [WHITE, BLUE, BLUE],
        [BLUE, BLUE, WHITE, WHITE],
    ],
)
def test_setup_seats_players_and_builds_full_deck(make_engine, jobs) -> None:
    engine = make_engine(jobs=jobs)

    view = engine.view()
    assert view.game_state is GameStatus.PLAYING
    assert view.turn_phase is TurnPhase.COLLECT
    assert view.current_player_index == 0
    assert view.deck_remaining == 2 * len(GAME_CARDS) == 34
    assert view.round_number == 1
    for player, job in zip(view.players, jobs, strict=True):
        assert player.is_ready
        assert player.job.identifier is job
        if job is WHITE:
            assert player.money == 700
            assert player.skip_turns == 2
            assert player.has_debt
        else:
            assert player.money == 1200
            assert player.skip_turns == 0


def test_same_seed_gives_same_goals_and_deck(make_engine) -> None:
    first = make_engine(jobs=[BLUE, BLUE, BLUE], seed=21)
    second = make_engine(jobs=[BLUE, BLUE, BLUE], seed=21)

    assert [p.life_goal for p in first.players] == [p.life_goal for p in second.players]
    assert first.deck.draw() == second.deck.draw()


def test_choose_job_moves_through_seats(make_engine) -> None:
    engine = make_engine()
    engine.choose_player_count(2)

    result = engine.choose_job(WHITE)

    assert result.accepted
    assert result.view.game_state is GameStatus.SETUP_JOBS
    assert result.view.current_player_index == 1
    assert result.view.players[0].life_goal is not None
    assert "assigned life goal" in messages(result.view)[0]


def test_white_collar_skips_schooling_then_earns(make_engine, make_quiet_cards) -> None:
    engine = make_engine(jobs=[BLUE, WHITE], cards=make_quiet_cards(10))

    play_quiet_turn(engine)
    skipped = engine.collect()
    assert skipped.view.players[1].money == 700
    assert skipped.view.players[1].skip_turns == 1
    assert skipped.view.current_player_index == 0
    assert "Player 2 skips this turn." in messages(skipped.view, LogTone.WARNING)

    play_quiet_turn(engine)
    engine.collect()
    play_quiet_turn(engine)
    collected = engine.collect()

    assert collected.view.players[0].money == 1200 + 3 * 250
    assert collected.view.players[1].money == 1100
    assert collected.view.players[1].skip_turns == 0
    assert collected.view.turn_phase is TurnPhase.PREMIUM


def test_medical_bill_hits_uninsured_player(make_engine, make_quiet_cards) -> None:
    engine = make_engine(
        jobs=[BLUE, BLUE],
        cards=[*make_quiet_cards(3), card_titled("Medical Bill")],
        rules=GameRules(starting_money=950),
    )
    engine.collect()
    engine.resolve_premium(pay=True)

    result = engine.draw_card()

    assert result.view.players[0].money == 800
    assert result.view.turn_phase is TurnPhase.END
    assert result.view.last_drawn_card.title == "Medical Bill"
    assert any("Medical Bill" in line for line in messages(result.view, LogTone.DANGER))


def test_insurance_absorbs_negative_event(make_engine, make_quiet_cards) -> None:
    engine = make_engine(
        jobs=[BLUE, BLUE],
        cards=[*make_quiet_cards(3), card_titled("Medical Bill")],
        rules=GameRules(starting_money=1150),
    )
    engine.collect()
    engine.resolve_premium(pay=True)
    bought = engine.buy_insurance()
    assert bought.accepted
    assert bought.view.players[0].money == 1200

    result = engine.draw_card()

    assert result.view.players[0].money == 1200
    assert result.view.players[0].insurance
    assert "Player 1 used insurance to cover Medical Bill!" in messages(result.view)


def test_insurance_does_not_cover_personal_costs(make_engine, make_quiet_cards) -> None:
    engine = make_engine(
        jobs=[BLUE, BLUE], cards=[*make_quiet_cards(3), card_titled("Vacation")]
    )
    engine.collect()
    engine.resolve_premium(pay=True)
    engine.buy_insurance()

    result = engine.draw_card()

    player = result.view.players[0]
    assert player.money == 1200 + 250 - 200 - 200
    assert player.skip_turns == 1


def test_unaffordable_investment_ends_the_turn(make_engine, make_quiet_cards) -> None:
    engine = make_engine(
        jobs=[BLUE, BLUE],
        cards=[*make_quiet_cards(3), card_titled("Startup")],
        rules=GameRules(starting_money=0),
    )
    engine.collect()
    engine.resolve_premium(pay=True)

    result = engine.draw_card()

    assert result.view.turn_phase is TurnPhase.END
    assert result.view.pending_investment is None
    assert result.view.players[0].money == 250
    assert result.view.players[0].investments == []


def test_buying_an_investment(make_engine, make_quiet_cards) -> None:
    engine = make_engine(
        jobs=[BLUE, BLUE], cards=[*make_quiet_cards(3), card_titled("Bonds")]
    )
    engine.collect()
    engine.resolve_premium(pay=True)
    offered = engine.draw_card()
    assert offered.view.turn_phase is TurnPhase.DECISION
    assert offered.view.pending_investment.title == "Bonds"

    result = engine.decide_investment(buy=True)

    player = result.view.players[0]
    assert player.money == 1450 - 200
    assert [card.title for card in player.investments] == ["Bonds"]
    assert result.view.pending_investment is None
    assert result.view.turn_phase is TurnPhase.END


def test_passing_on_an_investment(make_engine, make_quiet_cards) -> None:
    engine = make_engine(
        jobs=[BLUE, BLUE], cards=[*make_quiet_cards(3), card_titled("Bank")]
    )
    engine.collect()
    engine.resolve_premium(pay=True)
    engine.draw_card()

    result = engine.decide_investment(buy=False)

    assert result.view.players[0].money == 1450
    assert result.view.players[0].investments == []
    assert "Player 1 passed on the investment." in messages(result.view)


def test_paying_and_declining_the_premium(make_engine, make_quiet_cards) -> None:
    engine = make_engine(jobs=[BLUE, BLUE], cards=make_quiet_cards(10))
    engine.collect()
    engine.resolve_premium(pay=True)
    engine.buy_insurance()
    engine.draw_card()
    engine.end_turn()
    play_quiet_turn(engine)

    engine.collect()
    paid = engine.resolve_premium(pay=True)
    assert paid.view.players[0].money == 1250 + 250 - 50
    assert paid.view.players[0].insurance
    engine.draw_card()
    engine.end_turn()
    play_quiet_turn(engine)

    engine.collect()
    declined = engine.resolve_premium(pay=False)

    assert not declined.view.players[0].insurance
    assert declined.view.players[0].money == 1450 + 250
    assert "Player 1 lost insurance coverage!" in messages(
        declined.view, LogTone.DANGER
    )
    assert declined.view.turn_phase is TurnPhase.ACTION


def test_declining_premium_without_a_policy_warns_only(
    make_engine, make_quiet_cards
) -> None:
    engine = make_engine(jobs=[BLUE, BLUE], cards=make_quiet_cards(4))
    engine.collect()

    result = engine.resolve_premium(pay=False)

    player = result.view.players[0]
    assert result.accepted
    assert player.money == 1450
    assert not player.insurance
    assert result.view.turn_phase is TurnPhase.ACTION
    assert messages(result.view)[0] == (
        "Player 1 skipped insurance payment. Warning: You are at risk!"
    )
    assert result.view.recent_log[0].tone is LogTone.WARNING
    assert messages(result.view, LogTone.DANGER) == []


def test_insurance_needs_enough_money(make_engine, make_quiet_cards) -> None:
    engine = make_engine(
        jobs=[BLUE, BLUE],
        cards=make_quiet_cards(4),
        rules=GameRules(starting_money=0, insurance_price=300),
    )
    engine.collect()
    engine.resolve_premium(pay=True)

    result = engine.buy_insurance()

    assert not result.accepted
    assert result.message == "Not enough money for insurance."
    assert result.view.players[0].money == 250
    assert not result.view.players[0].insurance
    assert result.view.turn_phase is TurnPhase.ACTION
    assert "Not enough money for insurance." in messages(result.view, LogTone.DANGER)


def test_buying_insurance_twice_is_rejected(make_engine, make_quiet_cards) -> None:
    engine = make_engine(jobs=[BLUE, BLUE], cards=make_quiet_cards(4))
    engine.collect()
    engine.resolve_premium(pay=True)
    engine.buy_insurance()

    result = engine.buy_insurance()

    assert not result.accepted
    assert result.view.players[0].money == 1250


def test_birthday_gift_pays_every_other_player(make_engine, make_quiet_cards) -> None:
    engine = make_engine(
        jobs=[BLUE, BLUE, BLUE],
        cards=[*make_quiet_cards(3), card_titled("Birthday Gift")],
    )
    engine.collect()
    engine.resolve_premium(pay=True)

    result = engine.draw_card()

    assert [player.money for player in result.view.players] == [1350, 1250, 1250]
    assert "Player 1 gave $50 to everyone!" in messages(result.view)


def test_unaffordable_gift_changes_nothing(make_engine, make_quiet_cards) -> None:
    big_gift = Card(
        identifier="int_big",
        card_type=CardType.INTERACTION,
        title="Wedding Gift",
        description="Give $200 to each other player.",
        value=-200,
        effect=CardEffect.SHARED_GIFT,
    )
    engine = make_engine(
        jobs=[BLUE, BLUE, BLUE],
        cards=[*make_quiet_cards(3), big_gift],
        rules=GameRules(starting_money=0),
    )
    engine.collect()
    engine.resolve_premium(pay=True)

    result = engine.draw_card()

    assert [player.money for player in result.view.players] == [250, 0, 0]
    assert "Player 1 can't afford to give $200 to everyone." in messages(
        result.view, LogTone.WARNING
    )
    assert result.view.turn_phase is TurnPhase.END


def test_sick_day_costs_the_next_turn(make_engine, make_quiet_cards) -> None:
    engine = make_engine(
        jobs=[BLUE, BLUE], cards=[*make_quiet_cards(5), card_titled("Sick Day")]
    )
    engine.collect()
    engine.resolve_premium(pay=True)
    drawn = engine.draw_card()
    assert drawn.view.players[0].skip_turns == 1
    engine.end_turn()
    play_quiet_turn(engine)

    result = engine.collect()

    assert result.view.players[0].money == 1450
    assert result.view.players[0].skip_turns == 0
    assert result.view.current_player_index == 1
    assert result.view.turn_phase is TurnPhase.COLLECT


def test_round_number_follows_cards_drawn(make_engine, make_quiet_cards) -> None:
    engine = make_engine(jobs=[BLUE, BLUE], cards=make_quiet_cards(6))

    play_quiet_turn(engine)
    assert engine.view().round_number == 1
    play_quiet_turn(engine)

    assert engine.view().round_number == 2


def test_exhausted_deck_ends_and_archives_the_game(
    make_engine, make_quiet_cards, archive
) -> None:
    engine = make_engine(jobs=[BLUE, BLUE], cards=make_quiet_cards(2))
    play_quiet_turn(engine)
    engine.collect()
    engine.resolve_premium(pay=True)
    last = engine.draw_card()
    assert last.view.deck_remaining == 0
    assert last.view.game_state is GameStatus.PLAYING

    result = engine.end_turn()

    view = result.view
    assert view.game_state is GameStatus.ENDED
    assert view.standings is not None
    assert view.standings.winner == "Player 1"
    assert [summary.final_money for summary in view.standings.players] == [1450, 1450]
    assert view.archived_session_id == 1
    assert len(archive.list_sessions()) == 1
    assert view.round_number == 0
    assert any(line.startswith("Player 1 wins with $") for line in messages(view))


def test_drawing_from_an_empty_deck_ends_the_game(make_engine, archive) -> None:
    engine = make_engine(jobs=[BLUE, WHITE], cards=[])
    engine.collect()
    engine.resolve_premium(pay=True)

    result = engine.draw_card()

    assert result.accepted
    assert result.view.game_state is GameStatus.ENDED
    assert result.view.standings.players[0].name == "Player 1"
    assert archive.list_sessions()[0].winner == "Player 1"


def test_liquidation_rolls_are_logged(make_engine, make_quiet_cards) -> None:
    engine = make_engine(
        jobs=[BLUE, BLUE], cards=[card_titled("Bank"), *make_quiet_cards(1)]
    )
    play_quiet_turn(engine)
    engine.collect()
    engine.resolve_premium(pay=True)
    engine.draw_card()
    engine.decide_investment(buy=True)

    result = engine.end_turn()

    summary = next(s for s in result.view.standings.players if s.name == "Player 2")
    assert len(summary.rolls) == 1
    assert any(
        line.startswith("Player 2 rolled for investments:")
        for line in messages(result.view)
    )


@pytest.mark.parametrize(
    "error",
    [SessionStorageError("database down"), SessionValidationError("bad payload")],
)
def test_archive_failure_keeps_the_standings(error: Exception) -> None:
    failing = _FailingArchive(error)
    engine = TurnEngine(
        GameRules(),
        archive=failing,
        rng_service=DeterministicRandomService(3),
        deck_factory=lambda _catalog, _rng: Deck(),
    )
    engine.choose_player_count(2)
    engine.choose_job(BLUE)
    engine.choose_job(BLUE)
    engine.collect()
    engine.resolve_premium(pay=True)

    result = engine.draw_card()

    assert failing.calls == 1
    assert result.view.game_state is GameStatus.ENDED
    assert result.view.standings is not None
    assert result.view.archived_session_id is None


def test_actions_after_the_game_ends_are_rejected(make_engine) -> None:
    engine = make_engine(jobs=[BLUE, BLUE], cards=[])
    engine.collect()
    engine.resolve_premium(pay=True)
    engine.draw_card()

    result = engine.collect()

    assert not result.accepted
    assert result.view.game_state is GameStatus.ENDED


def test_out_of_order_inputs_are_declined(make_engine, make_quiet_cards) -> None:
    engine = make_engine()
    early = engine.collect()
    assert not early.accepted
    assert early.view.game_state is GameStatus.SETUP_COUNT

    engine = make_engine(jobs=[BLUE, BLUE], cards=make_quiet_cards(4))
    wrong_phase = engine.draw_card()

    assert not wrong_phase.accepted
    assert wrong_phase.view.turn_phase is TurnPhase.COLLECT
    assert wrong_phase.message in messages(wrong_phase.view, LogTone.WARNING)
    assert not engine.decide_investment(buy=True).accepted
    assert not engine.end_turn().accepted


@pytest.mark.parametrize("count", [0, 1, 5])
def test_player_count_outside_window_is_rejected(make_engine, count: int) -> None:
    engine = make_engine()

    result = engine.choose_player_count(count)

    assert not result.accepted
    assert result.view.game_state is GameStatus.SETUP_COUNT
    assert result.view.players == ()


def test_unknown_job_is_rejected(make_engine) -> None:
    engine = make_engine()
    engine.choose_player_count(2)

    result = engine.choose_job("astronaut")

    assert not result.accepted
    assert result.message == "Unknown job 'astronaut'."
    assert result.view.players[0].job is None


def test_view_is_detached_from_engine_state(make_engine) -> None:
    engine = make_engine(jobs=[BLUE, BLUE])
    view = engine.view()

    view.players[0].money = 0

    assert engine.players[0].money == 1200

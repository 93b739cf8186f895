"""
Tests for match outcome classification.

Verifies:
- The verdict follows the main format only
- Cash results agree with the payout calculation
- Empty or unplayable matches come out tied
"""

import pytest

from models import (
    Match,
    MatchFormat,
    MatchOptions,
    OutcomeResult,
    Profile,
    Scorecard,
    Tee,
)
from services.outcome import calculate_match_outcome
from services.payouts import build_match_report

TEE = Tee(slope=113, rating=72.0, par=72, stroke_index=tuple(range(1, 19)), id="tee-1")


def card(user_id: str, scores: list[int]) -> Scorecard:
    return Scorecard.from_strokes(user_id, scores, match_id="m-1")


def make_match(fmt: MatchFormat, stakes: int, players: list[str], **options) -> Match:
    return Match(
        id="m-1",
        format=fmt,
        stakes_cents=stakes,
        player_ids=tuple(players),
        options=MatchOptions(**options),
        max_players=max(2, len(players)),
    )


@pytest.fixture
def heads_up():
    profiles = [Profile(id="alice", handicap_index=10.0), Profile(id="bob", handicap_index=5.0)]
    cards = [card("alice", [5] * 18), card("bob", [4] * 18)]
    return profiles, cards


@pytest.fixture
def stroke_play_field():
    profiles = [Profile(id=u, handicap_index=0.0) for u in ("a", "b", "c")]
    cards = [card("a", [4] * 17 + [3]), card("b", [4] * 18), card("c", [5] * 18)]
    return profiles, cards


# =============================================================================
# Match Play
# =============================================================================

class TestMatchPlayOutcome:

    def test_winner_and_loser(self, heads_up):
        profiles, cards = heads_up
        match = make_match(MatchFormat.MATCH_PLAY_NET, 900, ["alice", "bob"])

        bob = calculate_match_outcome(match, TEE, profiles, cards, "bob")
        alice = calculate_match_outcome(match, TEE, profiles, cards, "alice")

        assert (bob.result, bob.winnings) == (OutcomeResult.WON, 900)
        assert (alice.result, alice.winnings) == (OutcomeResult.LOST, -900)

    def test_side_bets_included(self, heads_up):
        profiles, cards = heads_up
        match = make_match(MatchFormat.MATCH_PLAY_NET, 900, ["alice", "bob"], skins=True, nassau=True)

        bob = calculate_match_outcome(match, TEE, profiles, cards, "bob")
        alice = calculate_match_outcome(match, TEE, profiles, cards, "alice")

        assert bob.winnings == 2250
        assert alice.winnings == -2250

    def test_side_bets_excluded(self, heads_up):
        profiles, cards = heads_up
        match = make_match(MatchFormat.MATCH_PLAY_NET, 900, ["alice", "bob"], skins=True, nassau=True)

        bob = calculate_match_outcome(match, TEE, profiles, cards, "bob", include_side_bets=False)

        assert (bob.result, bob.winnings) == (OutcomeResult.WON, 900)

    def test_all_square_is_tied(self):
        profiles = [Profile(id="p1", handicap_index=8.0), Profile(id="p2", handicap_index=8.0)]
        cards = [card("p1", [4] * 18), card("p2", [4] * 18)]
        match = make_match(MatchFormat.MATCH_PLAY_NET, 500, ["p1", "p2"])

        outcome = calculate_match_outcome(match, TEE, profiles, cards, "p1")

        assert outcome.result == OutcomeResult.TIED
        assert outcome.winnings == 0

    def test_three_cards_is_tied(self):
        profiles = [Profile(id=u, handicap_index=0.0) for u in ("a", "b", "c")]
        cards = [card("a", [3] * 18), card("b", [4] * 18), card("c", [5] * 18)]
        match = make_match(MatchFormat.MATCH_PLAY_NET, 500, ["a", "b", "c"])

        outcome = calculate_match_outcome(match, TEE, profiles, cards, "a")

        assert (outcome.result, outcome.winnings) == (OutcomeResult.TIED, 0)


class TestMatchPlayLargerRoster:
    """Three-player roster where only two players kept a card."""

    def setup_method(self):
        self.profiles = [Profile(id=u, handicap_index=0.0) for u in ("a", "b", "c")]
        self.cards = [card("a", [3] * 18), card("b", [4] * 18)]
        self.match = make_match(MatchFormat.MATCH_PLAY_NET, 500, ["a", "b", "c"])

    @pytest.mark.parametrize("include_side_bets", [True, False])
    def test_player_without_card_loses_stake(self, include_side_bets):
        outcome = calculate_match_outcome(
            self.match, TEE, self.profiles, self.cards, "c", include_side_bets=include_side_bets
        )

        assert (outcome.result, outcome.winnings) == (OutcomeResult.LOST, -500)

    def test_card_holders(self):
        a = calculate_match_outcome(self.match, TEE, self.profiles, self.cards, "a")
        b = calculate_match_outcome(self.match, TEE, self.profiles, self.cards, "b")

        assert (a.result, a.winnings) == (OutcomeResult.WON, 500)
        assert (b.result, b.winnings) == (OutcomeResult.LOST, -500)

    def test_losers_agree_with_settlement(self):
        report = build_match_report(self.match, TEE, self.profiles, self.cards)

        for uid in ("b", "c"):
            outcome = calculate_match_outcome(self.match, TEE, self.profiles, self.cards, uid)
            assert outcome.winnings == report.winnings[uid] - self.match.stakes_cents


# =============================================================================
# Net Stroke Play
# =============================================================================

class TestNetStrokeOutcome:

    def test_winner_takes_pot_less_stake(self, stroke_play_field):
        profiles, cards = stroke_play_field
        match = make_match(MatchFormat.NET_STROKE, 500, ["a", "b", "c"])

        outcome = calculate_match_outcome(match, TEE, profiles, cards, "a")

        assert (outcome.result, outcome.winnings) == (OutcomeResult.WON, 1000)

    @pytest.mark.parametrize("user_id", ["b", "c"])
    def test_losers_lose_stake(self, stroke_play_field, user_id):
        profiles, cards = stroke_play_field
        match = make_match(MatchFormat.NET_STROKE, 500, ["a", "b", "c"])

        outcome = calculate_match_outcome(match, TEE, profiles, cards, user_id)

        assert (outcome.result, outcome.winnings) == (OutcomeResult.LOST, -500)

    def test_skins_added_to_cash_result(self, stroke_play_field):
        profiles, cards = stroke_play_field
        match = make_match(MatchFormat.NET_STROKE, 300, ["a", "b", "c"], skins=True)

        with_skins = calculate_match_outcome(match, TEE, profiles, cards, "a")
        without = calculate_match_outcome(match, TEE, profiles, cards, "a", include_side_bets=False)

        assert with_skins.winnings == 800
        assert without.winnings == 600

    def test_handicaps_decide_the_winner(self):
        """A 10.0 shooting 80 nets 70 (95% of 10) against a scratch 71."""
        profiles = [Profile(id="hcp", handicap_index=10.0), Profile(id="scr", handicap_index=0.0)]
        cards = [card("hcp", [5] * 8 + [4] * 10), card("scr", [4] * 17 + [3])]
        match = make_match(MatchFormat.NET_STROKE, 1000, ["hcp", "scr"])

        outcome = calculate_match_outcome(match, TEE, profiles, cards, "hcp")

        assert outcome.result == OutcomeResult.WON


# =============================================================================
# Edge Cases
# =============================================================================

class TestOutcomeEdgeCases:

    def test_no_scorecards(self, heads_up):
        profiles, _ = heads_up
        match = make_match(MatchFormat.MATCH_PLAY_NET, 900, ["alice", "bob"], skins=True)

        outcome = calculate_match_outcome(match, TEE, profiles, [], "alice")

        assert outcome.result == OutcomeResult.TIED
        assert outcome.winnings == 0

    def test_outcome_matches_settlement(self, heads_up):
        profiles, cards = heads_up
        match = make_match(MatchFormat.MATCH_PLAY_NET, 900, ["alice", "bob"], skins=True, nassau=True)
        report = build_match_report(match, TEE, profiles, cards)

        for profile in profiles:
            outcome = calculate_match_outcome(match, TEE, profiles, cards, profile.id)
            assert outcome.winnings == report.winnings[profile.id] - match.stakes_cents

    def test_to_dict(self, heads_up):
        profiles, cards = heads_up
        match = make_match(MatchFormat.MATCH_PLAY_NET, 900, ["alice", "bob"])

        outcome = calculate_match_outcome(match, TEE, profiles, cards, "bob")

        assert outcome.to_dict() == {"result": "won", "winnings": 900}

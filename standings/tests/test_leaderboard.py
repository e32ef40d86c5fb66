from datetime import date
from decimal import Decimal

from django.test import SimpleTestCase

from standings.exceptions import SettingsNotFoundError, TournamentNotFoundError
from standings.leaderboard import LeaderboardService, award_skins, floor_currency
from standings.store import FeeSettings
from standings.tests.fakes import InMemoryScoringStore

TOURNAMENT_ID = 1


class LeaderboardTestCase(SimpleTestCase):

    def setUp(self):
        self.store = InMemoryScoringStore()
        self.store.add_tournament(TOURNAMENT_ID, date(2024, 6, 15), number_of_holes=18, paid=10)
        self.service = LeaderboardService(self.store)

    def record_round(self, player_id, strokes, quota_points):
        for hole_number, (score, quota) in enumerate(zip(strokes, quota_points), start=1):
            self.store.record(TOURNAMENT_ID, player_id, hole_number, score, quota)

    def entry_for(self, result, player_id):
        return next(e for e in result.entries if e.player_id == player_id)


class AggregationTests(LeaderboardTestCase):

    def test_totals_and_over_under(self):
        self.store.add_player(1, "Arnold", quota=5)
        self.record_round(1, strokes=[4, 5, 3], quota_points=[2, 1, 4])

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        entry = result.entries[0]
        self.assertEqual(entry.total_quota_points, 7)
        self.assertEqual(entry.over_under, 2)
        self.assertEqual(entry.holes_played, 3)
        self.assertEqual(entry.total_strokes, 12)
        self.assertEqual(entry.player_quota, 5)

    def test_players_without_scores_are_excluded(self):
        self.store.add_player(1, "Arnold", quota=5)
        self.store.add_player(2, "Byron", quota=5)
        self.record_round(1, strokes=[4], quota_points=[2])

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual([e.player_id for e in result.entries], [1])

    def test_reentered_hole_counts_once(self):
        self.store.add_player(1, "Arnold", quota=5)
        self.store.record(TOURNAMENT_ID, 1, 1, 6, 0)
        self.store.record(TOURNAMENT_ID, 1, 1, 4, 2)

        entry = self.service.compute_leaderboard(TOURNAMENT_ID).entries[0]

        self.assertEqual(entry.holes_played, 1)
        self.assertEqual(entry.total_strokes, 4)
        self.assertEqual(entry.total_quota_points, 2)

    def test_holes_played_never_exceeds_holes_in_round(self):
        self.store.add_player(1, "Arnold", quota=30)
        self.record_round(1, strokes=[4] * 18, quota_points=[2] * 18)

        entry = self.service.compute_leaderboard(TOURNAMENT_ID).entries[0]

        self.assertEqual(entry.holes_played, 18)

    def test_ordered_by_over_under_then_name(self):
        self.store.add_player(1, "Charles", quota=2)
        self.store.add_player(2, "Arnold", quota=2)
        self.store.add_player(3, "Byron", quota=1)
        self.record_round(1, strokes=[4], quota_points=[2])
        self.record_round(2, strokes=[5], quota_points=[2])
        self.record_round(3, strokes=[4], quota_points=[2])

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual([e.name for e in result.entries], ["Byron", "Arnold", "Charles"])
        self.assertEqual([e.rank for e in result.entries], [1, 2, 2])

    def test_empty_tournament_gives_empty_leaderboard(self):
        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual(result.entries, [])
        self.assertEqual(result.total_pot, 0)

    def test_empty_tournament_does_not_need_settings(self):
        self.store.settings = None

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual(result.entries, [])

    def test_unknown_tournament(self):
        with self.assertRaises(TournamentNotFoundError):
            self.service.compute_leaderboard(99)

    def test_missing_settings(self):
        self.store.settings = None
        self.store.add_player(1, "Arnold", quota=5)
        self.record_round(1, strokes=[4], quota_points=[2])

        with self.assertRaises(SettingsNotFoundError):
            self.service.compute_leaderboard(TOURNAMENT_ID)

    def test_repeated_reads_are_identical(self):
        for player_id, name in enumerate(["Arnold", "Byron", "Charles", "Dow"], start=1):
            self.store.add_player(player_id, name, quota=3)
            self.record_round(player_id, strokes=[4, 3 + player_id % 2, 5], quota_points=[2, player_id % 3, 1])

        first = self.service.compute_leaderboard(TOURNAMENT_ID).to_dict()
        second = self.service.compute_leaderboard(TOURNAMENT_ID).to_dict()

        self.assertEqual(first, second)


class SkinsTests(LeaderboardTestCase):

    def test_unique_low_score_wins_skin(self):
        self.store.add_player(1, "Arnold", quota=5)
        self.store.add_player(2, "Byron", quota=5)
        self.record_round(1, strokes=[3, 4], quota_points=[4, 2])
        self.record_round(2, strokes=[4, 4], quota_points=[2, 2])

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual(self.entry_for(result, 1).skins, 1)
        self.assertEqual(self.entry_for(result, 1).skin_holes, [1])
        self.assertEqual(self.entry_for(result, 2).skins, 0)
        self.assertEqual(self.entry_for(result, 2).skin_holes, [])

    def test_tied_low_score_wins_nothing(self):
        self.store.add_player(1, "Arnold", quota=5)
        self.store.add_player(2, "Byron", quota=5)
        self.store.add_player(3, "Charles", quota=5)
        self.record_round(1, strokes=[3], quota_points=[4])
        self.record_round(2, strokes=[3], quota_points=[4])
        self.record_round(3, strokes=[5], quota_points=[1])

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual(result.total_skins, 0)
        self.assertEqual(result.skin_price_per_skin, 0)
        self.assertTrue(all(e.skins == 0 for e in result.entries))

    def test_skin_holes_are_sorted(self):
        self.store.add_player(1, "Arnold", quota=5)
        self.store.add_player(2, "Byron", quota=5)
        for hole_number in (9, 2, 14):
            self.store.record(TOURNAMENT_ID, 1, hole_number, 3, 4)
            self.store.record(TOURNAMENT_ID, 2, hole_number, 5, 1)

        skins = award_skins(self.store.get_scores_for_tournament(TOURNAMENT_ID))

        self.assertEqual(skins, {1: [2, 9, 14]})

    def test_lone_score_on_a_hole_wins_skin(self):
        self.store.add_player(1, "Arnold", quota=5)
        self.store.record(TOURNAMENT_ID, 1, 7, 6, 0)

        skins = award_skins(self.store.get_scores_for_tournament(TOURNAMENT_ID))

        self.assertEqual(skins, {1: [7]})


class PrizeTests(LeaderboardTestCase):

    def add_field(self, over_unders):
        """One player per value, each scoring a single hole to land on that over/under"""
        for player_id, over_under in enumerate(over_unders, start=1):
            self.store.add_player(player_id, "Player {:02d}".format(player_id), quota=10)
            self.store.record(TOURNAMENT_ID, player_id, 1, 4, 10 + over_under)

    def test_pots(self):
        self.add_field([3])

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual(result.total_pot, Decimal("400"))
        self.assertEqual(result.quota_prize_pot, Decimal("200"))
        self.assertEqual(result.skin_prize_pot, Decimal("120"))

    def test_nine_hole_fee(self):
        self.store.add_tournament(2, date(2024, 6, 22), number_of_holes=9, paid=8)
        self.store.add_player(1, "Arnold", quota=5)
        self.store.record(2, 1, 1, 4, 2)

        result = self.service.compute_leaderboard(2)

        self.assertEqual(result.total_pot, Decimal("160"))
        self.assertEqual(result.quota_prize_pot, Decimal("80"))

    def test_top_three_paid_in_order(self):
        self.add_field([5, 4, 3, 2, 1])

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual([e.rank for e in result.entries], [1, 2, 3, 4, 5])
        self.assertEqual([e.quota_prize_money for e in result.entries], [100, 60, 40, 0, 0])

    def test_three_way_tie_for_first_splits_whole_pot(self):
        self.add_field([2, 2, 2, 1])

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual([e.rank for e in result.entries], [1, 1, 1, 4])
        self.assertEqual([e.quota_prize_money for e in result.entries], [66, 66, 66, 0])

    def test_tie_for_second(self):
        self.add_field([5, 3, 3, 1])

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual([e.rank for e in result.entries], [1, 2, 2, 4])
        self.assertEqual([e.quota_prize_money for e in result.entries], [100, 50, 50, 0])

    def test_tie_straddling_third(self):
        self.add_field([5, 4, 3, 3, 1])

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual([e.rank for e in result.entries], [1, 2, 3, 3, 5])
        self.assertEqual([e.quota_prize_money for e in result.entries], [100, 60, 20, 20, 0])

    def test_skins_priced_from_skins_pot(self):
        # Arnold wins holes 1-2, Byron holes 3-5, nobody wins hole 6
        self.store.add_player(1, "Arnold", quota=10)
        self.store.add_player(2, "Byron", quota=10)
        self.store.add_player(3, "Charles", quota=10)
        winners = {1: 1, 2: 1, 3: 2, 4: 2, 5: 2, 6: None}
        for hole_number, winner in winners.items():
            for player_id in (1, 2, 3):
                strokes = 3 if player_id == winner else 4
                self.store.record(TOURNAMENT_ID, player_id, hole_number, strokes, 2)

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual(result.total_skins, 5)
        self.assertEqual(result.skin_price_per_skin, Decimal("24"))
        self.assertEqual(self.entry_for(result, 1).skin_prize_money, 48)
        self.assertEqual(self.entry_for(result, 2).skin_prize_money, 72)
        self.assertEqual(self.entry_for(result, 3).skin_prize_money, 0)

    def test_skin_prize_is_floored(self):
        self.store.settings = FeeSettings(Decimal("35"), Decimal("20"))
        self.store.paid[TOURNAMENT_ID] = 3
        self.store.add_player(1, "Arnold", quota=10)
        self.store.add_player(2, "Byron", quota=10)
        for hole_number in (1, 2, 3):
            self.store.record(TOURNAMENT_ID, 1, hole_number, 3, 2)
            self.store.record(TOURNAMENT_ID, 2, hole_number, 4, 2)
        self.store.record(TOURNAMENT_ID, 2, 4, 3, 2)
        self.store.record(TOURNAMENT_ID, 1, 4, 5, 2)

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        # pot 105, skins pot 31.5 over 4 skins
        self.assertEqual(result.skin_prize_pot, Decimal("31.5"))
        self.assertEqual(self.entry_for(result, 1).skin_prize_money, 23)
        self.assertEqual(self.entry_for(result, 2).skin_prize_money, 7)

    def test_even_share_of_skins_pot_is_paid_in_full(self):
        # skins pot 120 over 9 skins, three each
        for player_id, name in ((1, "Arnold"), (2, "Byron"), (3, "Charles")):
            self.store.add_player(player_id, name, quota=10)
        for hole_number in range(1, 10):
            winner = (hole_number - 1) // 3 + 1
            for player_id in (1, 2, 3):
                strokes = 3 if player_id == winner else 5
                self.store.record(TOURNAMENT_ID, player_id, hole_number, strokes, 2)

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual(result.total_skins, 9)
        self.assertEqual([e.skins for e in result.entries], [3, 3, 3])
        self.assertEqual([e.skin_prize_money for e in result.entries], [40, 40, 40])

    def test_no_paid_players(self):
        self.store.paid[TOURNAMENT_ID] = 0
        self.add_field([1, 0])

        result = self.service.compute_leaderboard(TOURNAMENT_ID)

        self.assertEqual([e.quota_prize_money for e in result.entries], [0, 0])

    def test_record_shape(self):
        self.add_field([1])

        record = self.service.compute_leaderboard(TOURNAMENT_ID).entries[0].to_dict()

        self.assertEqual(set(record.keys()), {
            "rank", "id", "name", "email", "player_quota", "total_quota_points", "over_under", "holes_played",
            "total_strokes", "skins", "skin_holes", "quota_prize_money", "skin_prize_money",
        })


class FloorCurrencyTests(SimpleTestCase):

    def test_floors_fractions(self):
        self.assertEqual(floor_currency(Decimal("66.999")), 66)
        self.assertEqual(floor_currency(Decimal("24")), 24)
        self.assertEqual(floor_currency(Decimal("0.4")), 0)

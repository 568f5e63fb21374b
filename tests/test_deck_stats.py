from neurondeck.models.deck import Deck
from neurondeck.services.deck_stats import count_cards, deck_statistics


class TestCountCards:
    def test_weighted_by_quantity(self, sample_deck: Deck) -> None:
        counts = count_cards(sample_deck)

        # 3 Dark Magician + 2 spell + 1 trap
        assert counts.main_deck == 6
        assert counts.extra_deck == 2
        assert counts.side_deck == 0
        assert counts.total == 8

    def test_empty_deck(self) -> None:
        assert count_cards(Deck()).total == 0


class TestDeckStatistics:
    def test_type_distribution(self, sample_deck: Deck) -> None:
        stats = deck_statistics(sample_deck)

        assert stats.type_distribution == {"モンスター": 5, "魔法": 2, "罠": 1}

    def test_monster_distributions(self, sample_deck: Deck) -> None:
        stats = deck_statistics(sample_deck)

        assert stats.attribute_distribution == {"闇": 5}
        assert stats.race_distribution == {"魔法使い族": 5}
        assert stats.level_distribution == {7: 3}
        assert stats.rank_distribution == {7: 1}
        assert stats.link_rating_distribution == {2: 1}
        assert stats.attack_distribution == {1700: 1, 2100: 1, 2500: 3}

    def test_card_count_included(self, sample_deck: Deck) -> None:
        assert deck_statistics(sample_deck).card_count.total == 8

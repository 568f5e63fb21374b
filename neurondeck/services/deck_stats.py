"""
Deck statistics.

Card counts and distributions over a scraped deck. Every figure is weighted
by card quantity, so three copies of a card count three times.
"""

from collections import Counter
from dataclasses import dataclass, field

from neurondeck.models.card import LinkMonster, MonsterBase, NormalMonster, XyzMonster
from neurondeck.models.deck import Deck


@dataclass
class DeckCardCount:
    """Number of cards per zone."""

    main_deck: int = 0
    extra_deck: int = 0
    side_deck: int = 0

    @property
    def total(self) -> int:
        return self.main_deck + self.extra_deck + self.side_deck


@dataclass
class DeckStatistics:
    """
    Distributions over a deck.

    Attributes:
        card_count: Cards per zone
        type_distribution: Card type -> count
        attribute_distribution: Attribute -> count (monsters only)
        race_distribution: Race -> count (monsters only)
        level_distribution: Level -> count (level-based monsters only)
        rank_distribution: Rank -> count (Xyz monsters only)
        link_rating_distribution: Link rating -> count (Link monsters only)
        attack_distribution: Attack -> count (monsters only)
    """

    card_count: DeckCardCount
    type_distribution: dict[str, int] = field(default_factory=dict)
    attribute_distribution: dict[str, int] = field(default_factory=dict)
    race_distribution: dict[str, int] = field(default_factory=dict)
    level_distribution: dict[int, int] = field(default_factory=dict)
    rank_distribution: dict[int, int] = field(default_factory=dict)
    link_rating_distribution: dict[int, int] = field(default_factory=dict)
    attack_distribution: dict[int, int] = field(default_factory=dict)


def count_cards(deck: Deck) -> DeckCardCount:
    """Count cards per zone, weighted by quantity."""
    return DeckCardCount(
        main_deck=sum(card.quantity for card in deck.main_deck),
        extra_deck=sum(card.quantity for card in deck.extra_deck),
        side_deck=sum(card.quantity for card in deck.side_deck),
    )


def deck_statistics(deck: Deck) -> DeckStatistics:
    """Compute type, attribute, race, level, rank, link and attack distributions."""
    types: Counter[str] = Counter()
    attributes: Counter[str] = Counter()
    races: Counter[str] = Counter()
    levels: Counter[int] = Counter()
    ranks: Counter[int] = Counter()
    links: Counter[int] = Counter()
    attacks: Counter[int] = Counter()

    for card in deck.all_cards():
        types[card.type] += card.quantity
        if not isinstance(card, MonsterBase):
            continue

        attributes[card.attribute] += card.quantity
        races[card.race] += card.quantity
        attacks[card.attack] += card.quantity
        if isinstance(card, NormalMonster):
            levels[card.level] += card.quantity
        elif isinstance(card, XyzMonster):
            ranks[card.rank] += card.quantity
        elif isinstance(card, LinkMonster):
            links[card.link] += card.quantity

    return DeckStatistics(
        card_count=count_cards(deck),
        type_distribution=dict(types),
        attribute_distribution=dict(attributes),
        race_distribution=dict(races),
        level_distribution=dict(sorted(levels.items())),
        rank_distribution=dict(sorted(ranks.items())),
        link_rating_distribution=dict(sorted(links.items())),
        attack_distribution=dict(sorted(attacks.items())),
    )

"""
Extraction schemas for the three 247Sports recruiting listings.

The football, men's basketball and women's basketball sites share one page
layout, so each record kind has a single schema reused by every sport.
"""
from .base import (
    ExtractionSchema,
    attribute,
    count,
    own_text,
    page_rank,
    required_fields,
    split,
    text,
)


UNCOMMITTED = 'uncommitted'
MAX_STARS = 5


PLAYER_RANKINGS = ExtractionSchema(
    item_selector=(
        'ul.rankings-page__list > '
        'li.rankings-page__list-item:not(.rankings-page__list-item--header)'
    ),
    fields={
        'name': text('.rankings-page__name-link'),
        'high_school': text('span.meta'),
        'position': text('.position'),
        # "6-2 / 195"
        'height': split('.metrics', part=0),
        'weight': split('.metrics', part=1),
        'stars': count('.rankings-page__star-and-score > .yellow', limit=MAX_STARS),
        'rating': text('.score'),
        'college': attribute('.img-link > img', 'title', default=UNCOMMITTED),
    },
    derived_fields={'ranking': page_rank},
)


SCHOOL_RANKINGS = ExtractionSchema(
    item_selector='.rankings-page__list-item:not(.rankings-page__list-item--header)',
    fields={
        'rank': text('.rank-column .primary'),
        'school': text('.rankings-page__name-link'),
        'total_commits': text('.total a'),
        'five_stars': text('ul.star-commits-list > li > div', nth=0, remove='5: '),
        'four_stars': text('ul.star-commits-list > li > div', nth=1, remove='4: '),
        'three_stars': text('ul.star-commits-list > li > div', nth=2, remove='3: '),
        'average_rating': text('.avg'),
        'points': text('.number'),
    },
)


COMMITS = ExtractionSchema(
    item_selector='.ri-page__list-item',
    fields={
        'name': text('.ri-page__name-link'),
        'high_school': text('span.meta'),
        'position': text('.position'),
        'height': split('.metrics', part=0),
        'weight': split('.metrics', part=1),
        'stars': count('.ri-page__star-and-score .yellow', limit=MAX_STARS),
        # the score cell nests a label element next to the rating itself
        'rating': own_text('span.score'),
        'national_rank': text('.natrank'),
        'state_rank': text('.sttrank'),
        'position_rank': text('.posrank'),
    },
    # header and ad rows use the same class but carry no recruit
    is_valid=required_fields('name', 'rating'),
)

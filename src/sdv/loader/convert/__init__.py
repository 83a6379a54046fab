from .recruiting import (
    RECORD_MODELS,
    row_to_player_ranking,
    row_to_school_ranking,
    row_to_commit,
    rows_to_records,
    record_to_json,
    records_to_json,
)

__all__ = [
    "RECORD_MODELS",
    "row_to_player_ranking",
    "row_to_school_ranking",
    "row_to_commit",
    "rows_to_records",
    "record_to_json",
    "records_to_json",
]

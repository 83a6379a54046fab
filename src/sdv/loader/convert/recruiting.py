from __future__ import annotations

from typing import Any, Dict, Iterable, List

from src.sdv.models.recruiting import (
    Commit,
    PlayerRanking,
    RecordKind,
    RecruitingRecord,
    SchoolRanking,
)


RECORD_MODELS: Dict[RecordKind, type[RecruitingRecord]] = {
    RecordKind.PLAYER_RANKING: PlayerRanking,
    RecordKind.SCHOOL_RANKING: SchoolRanking,
    RecordKind.COMMIT: Commit,
}


def row_to_player_ranking(row: Dict[str, Any]) -> PlayerRanking:
    """Convert an extracted player-ranking row to a PlayerRanking record."""
    return PlayerRanking.model_validate(row)


def row_to_school_ranking(row: Dict[str, Any]) -> SchoolRanking:
    """Convert an extracted school-ranking row to a SchoolRanking record."""
    return SchoolRanking.model_validate(row)


def row_to_commit(row: Dict[str, Any]) -> Commit:
    """Convert an extracted commit row to a Commit record."""
    return Commit.model_validate(row)


def rows_to_records(kind: RecordKind, rows: Iterable[Dict[str, Any]]) -> List[RecruitingRecord]:
    """Convert engine rows of one kind to typed records, keeping their order."""
    model = RECORD_MODELS[kind]
    return [model.model_validate(row) for row in rows]


def record_to_json(record: RecruitingRecord) -> Dict[str, Any]:
    """Convert a record to a JSON-serializable dict with camelCase keys."""
    return record.model_dump(by_alias=True)


def records_to_json(records: Iterable[RecruitingRecord]) -> List[Dict[str, Any]]:
    return [record_to_json(record) for record in records]

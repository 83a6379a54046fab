from .adapter import (
    InstitutionGroup,
    RankingsType,
    RecruitingRequest,
    Sport,
    UnsupportedConfiguration,
    build_request,
)
from .sports247 import (
    RecruitingClient,
    get_player_rankings,
    get_school_commits,
    get_school_rankings,
    load_rows,
)

__all__ = [
    "InstitutionGroup",
    "RankingsType",
    "RecruitingRequest",
    "Sport",
    "UnsupportedConfiguration",
    "build_request",
    "RecruitingClient",
    "get_player_rankings",
    "get_school_commits",
    "get_school_rankings",
    "load_rows",
]

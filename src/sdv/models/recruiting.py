"""
Immutable recruiting records built from 247Sports listings.

Classes:
- PlayerRanking: one recruit in a player-ranking listing, with a global listing rank
- SchoolRanking: one school in a recruiting-class ranking listing
- Commit: one recruit committed to a school
- RecordKind: Enum of the three record kinds

All records expose snake_case attributes and serialize to camelCase keys
(`model_dump(by_alias=True)`), e.g. `high_school` -> `highSchool`.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RecordKind(Enum):

    PLAYER_RANKING = 'player_ranking'
    SCHOOL_RANKING = 'school_ranking'
    COMMIT = 'commit'


class RecruitingRecord(BaseModel):

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class PlayerRanking(RecruitingRecord):

    ranking: int = Field(ge=1)
    name: str = ''
    high_school: str = ''
    position: str = ''
    height: str = ''
    weight: str = ''
    stars: int = Field(default=0, ge=0, le=5)
    rating: str = ''
    college: str = 'uncommitted'

    def __repr__(self):
        return f'#{self.ranking} {self.name} ({self.position}, {self.stars}*) -> {self.college}'


class SchoolRanking(RecruitingRecord):

    rank: str = ''
    school: str = ''
    total_commits: str = ''
    five_stars: str = ''
    four_stars: str = ''
    three_stars: str = ''
    average_rating: str = ''
    points: str = ''

    def __repr__(self):
        return f'{self.rank}. {self.school} ({self.points})'


class Commit(RecruitingRecord):

    name: str
    high_school: str = ''
    position: str = ''
    height: str = ''
    weight: str = ''
    stars: int = Field(default=0, ge=0, le=5)
    rating: str
    national_rank: str = ''
    state_rank: str = ''
    position_rank: str = ''

    def __repr__(self):
        return f'{self.name} ({self.position}, {self.stars}*, {self.rating})'

"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .build import BuildCreate, BuildListResponse, BuildModeration, BuildResponse, BuildUpdate
from .guide import GuideCreate, GuideResponse, GuideUpdate
from .stats import DerivedStatsOut, ProjectionRequest, ProjectionResponse, StatAllocationIn
from .tools import ClassInfoOut, SkillEvolutionOut, XpBetweenOut, XpTableEntryOut
from .vote import UserVoteResponse, VoteCreate, VoteResponse
from .wiki import ItemDetail, ItemSummary, MobListResponse, MobResponse

__all__ = [
    "BuildCreate", "BuildListResponse", "BuildModeration", "BuildResponse", "BuildUpdate",
    "GuideCreate", "GuideResponse", "GuideUpdate",
    "DerivedStatsOut", "ProjectionRequest", "ProjectionResponse", "StatAllocationIn",
    "ClassInfoOut", "SkillEvolutionOut", "XpBetweenOut", "XpTableEntryOut",
    "UserVoteResponse", "VoteCreate", "VoteResponse",
    "ItemDetail", "ItemSummary", "MobListResponse", "MobResponse",
]

"""Talent pool contracts — static and criteria-driven candidate pools."""

from enum import Enum

from talentgate.validators import (
    Each,
    IsArray,
    IsEnum,
    IsObject,
    IsString,
    IsUUID,
    ShapeDefinition,
    field,
    optional,
)


class TalentPoolType(str, Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


# Dynamic pool criteria (skills, experience range, locations, tags, title,
# company) are interpreted by the pool service; only the container is checked
CREATE_TALENT_POOL = ShapeDefinition(
    "create_talent_pool",
    field("name", IsString()),
    optional("description", IsString()),
    field("type", IsEnum(TalentPoolType)),
    optional("criteria", IsObject()),
    optional("ownerId", IsUUID()),
    optional("tags", IsArray(), Each(IsString())),
    optional("candidateIds", IsArray(), Each(IsUUID())),
    description="Create a talent pool of hand-picked or matching candidates",
)

SHAPES = [CREATE_TALENT_POOL]

"""Candidate contracts — create, update and merge."""

from talentgate.validators import (
    Each,
    EachValue,
    IsArray,
    IsBoolean,
    IsEmail,
    IsIn,
    IsObject,
    IsString,
    IsUrl,
    IsUUID,
    MaxLength,
    ShapeDefinition,
    field,
    optional,
)

# Which side wins when the same field differs between two merged candidates
MERGE_SIDES = ("source", "target")

CREATE_CANDIDATE = ShapeDefinition(
    "create_candidate",
    field("email", IsEmail()),
    optional("firstName", IsString(), MaxLength(100)),
    optional("lastName", IsString(), MaxLength(100)),
    optional("phone", IsString(), MaxLength(50)),
    optional("locationCity", IsString(), MaxLength(100)),
    optional("locationState", IsString(), MaxLength(100)),
    optional("locationCountry", IsString(), MaxLength(100)),
    optional("currentCompany", IsString(), MaxLength(255)),
    optional("currentTitle", IsString(), MaxLength(255)),
    optional("linkedinUrl", IsUrl()),
    optional("githubUrl", IsUrl()),
    optional("portfolioUrl", IsUrl()),
    optional("tags", IsArray(), Each(IsString())),
    optional("sourceType", IsString(), MaxLength(50)),
    optional("sourceDetails", IsObject()),
    optional("gdprConsent", IsBoolean()),
    optional("customFields", IsObject()),
    description="Create a candidate profile",
)

UPDATE_CANDIDATE = CREATE_CANDIDATE.derive(
    "update_candidate",
    partial=True,
    description="Update any subset of a candidate profile",
)

MERGE_CANDIDATES = ShapeDefinition(
    "merge_candidates",
    field("targetCandidateId", IsUUID()),
    optional("fieldResolutions", EachValue(IsIn(MERGE_SIDES))),
    description="Merge a duplicate candidate into a target, choosing a side per conflicting field",
)

SHAPES = [CREATE_CANDIDATE, UPDATE_CANDIDATE, MERGE_CANDIDATES]

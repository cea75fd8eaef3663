"""Authentication contracts — MFA token verification and MFA login."""

from talentgate.validators import IsString, IsUUID, Length, ShapeDefinition, field

# TOTP codes are 6 digits; backup codes are 8 characters
MFA_TOKEN_MIN_LENGTH = 6
MFA_TOKEN_MAX_LENGTH = 8

VERIFY_MFA = ShapeDefinition(
    "verify_mfa",
    field("token", IsString(), Length(MFA_TOKEN_MIN_LENGTH, MFA_TOKEN_MAX_LENGTH)),
    description="Verify an MFA token to enable, disable or regenerate backup codes",
)

MFA_LOGIN = ShapeDefinition(
    "mfa_login",
    field("userId", IsUUID()),
    field("token", IsString(), Length(MFA_TOKEN_MIN_LENGTH, MFA_TOKEN_MAX_LENGTH)),
    description="Complete a login that is waiting on a second factor",
)

SHAPES = [VERIFY_MFA, MFA_LOGIN]

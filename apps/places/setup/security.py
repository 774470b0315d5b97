"""Access token dependencies.

서명 검증은 앞단(Ingress/Istio)에서 끝났다고 가정하고
Authorization 헤더의 JWT payload만 추출합니다.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, status
from jose import JWTError, jwt
from pydantic import BaseModel

from places.setup.config import Settings, get_settings


class TokenType(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"


class TokenPayload(BaseModel):
    sub: str
    jti: str
    type: TokenType
    exp: int
    iat: int
    provider: str


_DISABLED_TOKEN = TokenPayload(
    sub="00000000-0000-0000-0000-000000000000",
    jti="places-auth-disabled",
    type=TokenType.ACCESS,
    exp=4102444800,  # 2100-01-01 UTC
    iat=0,
    provider="disabled",
)


def extract_token_payload(token: str) -> TokenPayload:
    """서명 검증 없이 JWT payload를 디코딩합니다."""
    try:
        payload = jwt.get_unverified_claims(token)
        return TokenPayload(
            sub=payload["sub"],
            jti=payload["jti"],
            type=TokenType(payload["type"]),
            exp=payload["exp"],
            iat=payload["iat"],
            provider=payload["provider"],
        )
    except (JWTError, KeyError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Malformed token"
        ) from exc


async def access_token_dependency(
    settings: Annotated[Settings, Depends(get_settings)],
    authorization: Optional[str] = Header(default=None),
) -> TokenPayload:
    """인증된 호출자의 access token payload를 반환합니다."""
    if settings.auth_disabled:
        return _DISABLED_TOKEN

    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Only authenticated users may invoke this operation",
        )

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid authorization format"
        )

    payload = extract_token_payload(token)
    if payload.type is not TokenType.ACCESS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Token type mismatch"
        )
    return payload


async def admin_token_dependency(
    token: Annotated[TokenPayload, Depends(access_token_dependency)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenPayload:
    """관리자 호출자만 통과시킵니다."""
    if settings.auth_disabled or token.sub in settings.admin_subjects:
        return token
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="You are not authorized to perform this operation",
    )

from identity_service.infra.jwt.token_issuer import JWTTokenIssuer

__all__ = ["JWTTokenIssuer"]

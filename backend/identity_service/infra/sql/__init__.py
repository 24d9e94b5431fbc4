from identity_service.infra.sql.user_store import SQLAlchemyUserStore

__all__ = ["SQLAlchemyUserStore"]

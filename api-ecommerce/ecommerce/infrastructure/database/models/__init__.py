# imported for side effects: registers every table on BaseModel.metadata
from ecommerce.infrastructure.database.models.user_model import UserModel
from ecommerce.infrastructure.database.models.revoked_token_model import RevokedTokenModel

__all__ = ["UserModel", "RevokedTokenModel"]

from pydantic import BaseModel


class Usuario(BaseModel):
    """User record returned by the lookup service. Never persisted."""
    id: int
    name: str
    email: str

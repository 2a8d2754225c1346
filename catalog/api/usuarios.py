from fastapi import APIRouter

from catalog.schemas.usuario import Usuario
from catalog.services.usuario_service import get_usuario

router = APIRouter(prefix="/usuarios", tags=["Usuarios"])


@router.get(
    "/{usuario_id}",
    response_model=Usuario,
    summary="Get user by ID",
    description="Look up a user. Unknown ids return a placeholder user."
)
def read_usuario(usuario_id: int):
    return get_usuario(usuario_id)

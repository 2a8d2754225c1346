from typing import Dict, Tuple

from catalog.schemas.usuario import Usuario

# Static stand-in for a user database: id -> (name, email)
USUARIOS: Dict[int, Tuple[str, str]] = {
    1: ("Alice", "alice@example.com"),
    2: ("Bob", "bob@example.com"),
}

UNKNOWN_NAME = "Usuario Desconocido"
UNKNOWN_EMAIL = "desconocido@example.com"


def get_usuario(usuario_id: int) -> Usuario:
    """Look up a user; unknown ids get a placeholder record echoing the id."""
    name, email = USUARIOS.get(usuario_id, (UNKNOWN_NAME, UNKNOWN_EMAIL))
    return Usuario(id=usuario_id, name=name, email=email)

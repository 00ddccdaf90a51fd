# Password Mint derivation services
from password_mint.services.generator import derive_password, derive_password_async

__all__ = ["derive_password", "derive_password_async"]

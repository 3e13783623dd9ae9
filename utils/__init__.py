from .random_gen import SecureRandom
from .framing    import Framing

__all__ = ["SecureRandom", "Framing"]

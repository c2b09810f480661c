from dataclasses import dataclass

import logging
logger = logging.getLogger(__name__)

# x^8 + x^4 + x^3 + x^2 + 1
GF_PRIMITIVE_POLY = 0x11D
GF_ORDER = 255
GF_EXP_SIZE = 2 * GF_ORDER - 1


@dataclass(frozen=True)
class GaloisTables:
    """
    Exponent and logarithm tables for GF(2^8).

    exp holds 509 entries, the second half repeating the first, so a product
    can be looked up as exp[log[a] + log[b]] without reducing modulo 255.
    """
    poly: int
    exp: bytes
    log: bytes

    @classmethod
    def build(cls, poly: int = GF_PRIMITIVE_POLY) -> 'GaloisTables':
        exp = bytearray(GF_EXP_SIZE)
        log = bytearray(256)

        b = 1
        for i in range(GF_ORDER):
            exp[i] = b
            log[b] = i
            b <<= 1
            if b & 0x100:
                b ^= poly

        for i in range(GF_ORDER, GF_EXP_SIZE):
            exp[i] = exp[i - GF_ORDER]

        logger.debug(f"Built GF(256) tables for polynomial 0x{poly:03X}")
        return cls(poly=poly, exp=bytes(exp), log=bytes(log))


def gf_mult(tables: GaloisTables, a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return tables.exp[tables.log[a] + tables.log[b]]


DEFAULT_GALOIS_TABLES = GaloisTables.build()

from pmf.CD.galois import GaloisTables, DEFAULT_GALOIS_TABLES, gf_mult
from pmf.errors import ParityInputError

# Span lengths: header + subheader + data + EDC for P, plus P parity for Q
P_SPAN_SIZE = 2064
Q_SPAN_SIZE = 2236
P_PARITY_SIZE = 172
Q_PARITY_SIZE = 104

# The 4 header bytes take part in the layout but not in the parity
HEADER_SIZE = 4


class ReedSolomonParity:
    """
    P and Q parity for CD-ROM Mode 2 Form 1 sectors.

    Every byte lane is run through a two stage LFSR dividing by
    g(x) = x^2 + G1*x + G0 over GF(2^8). The final register pair (r1, r0)
    is the lane's two parity bytes. A P lane walks down a column of the
    24 x 43 word matrix, a Q lane walks a diagonal of the 26 x 43 matrix.
    """
    G1 = 3
    G0 = 2

    def __init__(self, tables: GaloisTables = DEFAULT_GALOIS_TABLES):
        self._tables = tables

    def p_parity(self, span: bytes) -> bytes:
        if len(span) != P_SPAN_SIZE:
            raise ParityInputError(f"P parity needs {P_SPAN_SIZE} bytes, got {len(span)}")
        return self._lfsr_parity(span, 86, 24, 2, 86)

    def q_parity(self, span: bytes) -> bytes:
        if len(span) != Q_SPAN_SIZE:
            raise ParityInputError(f"Q parity needs {Q_SPAN_SIZE} bytes, got {len(span)}")
        return self._lfsr_parity(span, 52, 43, 86, 88)

    def _lfsr_parity(self, span: bytes, major_count: int, minor_count: int,
                     major_mult: int, minor_inc: int) -> bytes:
        tables = self._tables
        size = major_count * minor_count
        parity = bytearray(2 * major_count)

        # Odd majors are the high byte of the same 16-bit lane
        for major in range(major_count):
            idx = (major >> 1) * major_mult + (major & 1)
            r0 = 0
            r1 = 0

            for _ in range(minor_count):
                data = span[idx] if idx >= HEADER_SIZE else 0
                idx += minor_inc
                if idx >= size:
                    idx -= size

                feedback = data ^ r1
                r1 = r0 ^ gf_mult(tables, feedback, self.G1)
                r0 = gf_mult(tables, feedback, self.G0)

            parity[major] = r1
            parity[major + major_count] = r0

        return bytes(parity)

"""
Grammar — the heuristic negation core.

Token helpers, the clause state machine, the false-positive filter,
clause boundary detection, question classification, contraction
expansion and the inversion transform itself.
"""

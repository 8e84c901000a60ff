# Bounds of the signed 64-bit integer domain searched by binary_search.
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

# Masks over the raw 64-bit pattern of an IEEE-754 double.
UINT64_MASK = 2**64 - 1
SIGN_MASK = 2**63
MAGNITUDE_MASK = INT64_MAX

"""
Checked summation of fixed-width integer sequences.

Math primitives (integer kinds, checked addition, checked sum) and immutable
fixed-width value types. Overflow is reported as None, never wrapped.
"""

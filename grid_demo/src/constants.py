"""Integer bounds shared by the grids and the console parser."""

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

"""Indexing into packed upper-triangular matrices stored column by column."""


def triangular_matrix_index(n: int, i: int, j: int) -> int:
    """Return the packed index of element (i, j) of an n x n upper-triangular matrix.

    Requires ``i <= j < n``.
    """
    if j >= n:
        raise ValueError(f"column {j} out of range for matrix of size {n}")
    if i > j:
        raise ValueError(f"row {i} is below the diagonal in column {j}")
    return i + j * (j + 1) // 2


def triangular_matrix_index_permissive(n: int, i: int, j: int) -> int:
    """Like :func:`triangular_matrix_index`, but accepts (i, j) in either order."""
    if i <= j:
        return triangular_matrix_index(n, i, j)
    return triangular_matrix_index(n, j, i)
from typing import Iterator, Optional, Sequence, Tuple


def multi_indices(
    dims: Sequence[int],
    skip: Optional[int] = None,
) -> Iterator[Tuple[int, ...]]:
    """Iterate over every multi-index of a dimension vector.

    Indices are produced in storage order: dimension 0 varies fastest,
    like an odometer whose first wheel turns every step.

    Parameters
    ----------
    dims : sequence of int
        Dimension vector. An empty vector yields the single empty index.
    skip : int, optional
        Axis held at index 0 instead of being iterated.

    Yields
    ------
    tuple of int
        Multi-index ``(i_0, ..., i_{k-1})``.

    Examples
    --------
    >>> list(multi_indices([2, 2]))
    [(0, 0), (1, 0), (0, 1), (1, 1)]
    """
    sizes = [1 if axis == skip else size for axis, size in enumerate(dims)]
    if any(size < 1 for size in sizes):
        return

    index = [0] * len(sizes)
    while True:
        yield tuple(index)

        axis = 0
        while axis < len(sizes):
            index[axis] += 1
            if index[axis] < sizes[axis]:
                break
            index[axis] = 0
            axis += 1
        else:
            return


def tensor_flat_index(indices: Sequence[int], dims: Sequence[int]) -> int:
    """Flat storage position of a multi-index.

    ``i_0 + i_1*d_0 + i_2*d_0*d_1 + ...``; dimension 0 varies fastest.
    """
    index = 0
    stride = 1
    for i, size in zip(indices, dims):
        index += i * stride
        stride *= size

    return index

import torch

from torchcalculus.tensor import tensor_condense

from ._tensor_function import TensorFunction


def tensor_function_trim(f: TensorFunction, tol: float = 0.0) -> TensorFunction:
    """Drop trailing near-zero coefficients along every axis.

    Parameters
    ----------
    f : TensorFunction
        Input function.
    tol : float
        Coefficients with magnitude at most ``tol`` count as zero.

    Returns
    -------
    TensorFunction
        Function with the smallest dimensions that hold every remaining
        coefficient. The arity is unchanged.

    Examples
    --------
    >>> f = tensor_function(torch.tensor([[1.0, 0.0], [0.0, 0.0]]))
    >>> tensor_function_trim(f).coeffs
    tensor([[1.]], dtype=torch.float64)
    """
    coeffs = torch.where(
        f.coeffs.abs() > tol, f.coeffs, torch.zeros_like(f.coeffs)
    )

    region = tuple(slice(0, size) for size in tensor_condense(coeffs))

    return TensorFunction(coeffs=coeffs[region].clone())

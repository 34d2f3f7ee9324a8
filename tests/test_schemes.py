import pytest

from cryptoprims.schemes import (
    AsymmetricEncryptionScheme,
    CommitmentScheme,
    CRHScheme,
    TwoToOneCRHScheme,
)


@pytest.mark.parametrize(
    "scheme",
    [CRHScheme, TwoToOneCRHScheme, CommitmentScheme, AsymmetricEncryptionScheme],
)
def test_interfaces_cannot_be_instantiated(scheme):
    with pytest.raises(TypeError):
        scheme()


@pytest.mark.parametrize(
    "scheme, methods",
    [
        (CRHScheme, {"setup", "evaluate"}),
        (TwoToOneCRHScheme, {"setup", "evaluate", "compress"}),
        (CommitmentScheme, {"setup", "commit"}),
        (AsymmetricEncryptionScheme, {"setup", "keygen", "encrypt", "decrypt"}),
    ],
)
def test_required_methods(scheme, methods):
    assert scheme.__abstractmethods__ == frozenset(methods)
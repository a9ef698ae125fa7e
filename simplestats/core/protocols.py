"""
Core protocols for simplestats.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend or data container only has to look right, not inherit from us.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # DataSource type


@runtime_checkable
class DataSource(Protocol):
    """
    Minimal protocol for any data container used in a computation.

    SampleDesign implements it; the protocol exists so tooling can
    inspect a container without knowing its concrete type.
    """

    @property
    def n_observations(self) -> int:
        """Number of observations."""
        ...

    @property
    def metadata(self) -> dict[str, Any]:
        """
        Container-specific metadata.

        Example:
            {'n': 8, 'name': 'height'}
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    A backend takes a validated DataSource and produces a Result holding
    the parameter payload. Backends are stateless, which makes them easy
    to test and swap.

    Type Parameters:
        D: The DataSource type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{domain}', e.g. 'cpu_descriptive'.
        """
        ...

    def solve(self, design: D, **options: Any) -> 'Result[P]':
        """
        Execute the statistical computation.

        Args:
            design: Validated data container implementing DataSource
            **options: Backend-specific computation options

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            ValidationError: If a statistic's preconditions fail
            NumericalError: If a statistic is undefined for the data
        """
        ...

"""Classified errors shared by every layer of the application.

A ``ClassifiedError`` tells callers *what kind* of failure happened without
string matching: which group it belongs to (domain or infrastructure), the
specific kind for domain errors, and the entity it concerns. The description
is rendered once by the factory that builds the error and never changes.
"""

from __future__ import annotations

from enum import Enum

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
ALREADY_EXISTS = "ALREADY_EXISTS"
OUT_OF_RANGE = "OUT_OF_RANGE"
INVALID_FORMAT = "INVALID_FORMAT"
REQUIRED = "REQUIRED"
DOMAIN_ERROR = "DOMAIN_ERROR"
INFRASTRUCTURE_ERROR = "INFRASTRUCTURE_ERROR"


class Group(str, Enum):
    DOMAIN = "domain"
    INFRASTRUCTURE = "infrastructure"


class Kind(str, Enum):
    NONE = ""
    NOT_FOUND = "not found"
    ALREADY_EXISTS = "already exists"
    OUT_OF_RANGE = "out of range"
    INVALID_FORMAT = "invalid format"
    REQUIRED = "required"


class ClassifiedError(Exception):
    """An immutable, value-comparable error.

    Build instances with the factory classmethods (``not_found``,
    ``required``, ...). Two errors are equal only when group, kind, entity
    and description all match.
    """

    def __init__(
        self,
        group: Group,
        kind: Kind = Kind.NONE,
        entity: str = "",
        description: str = "",
    ) -> None:
        group = Group(group)
        kind = Kind(kind)
        if group is Group.INFRASTRUCTURE and (kind is not Kind.NONE or entity):
            raise ValueError("infrastructure errors carry neither a kind nor an entity")
        super().__init__(description)
        self._group = group
        self._kind = kind
        self._entity = entity
        self._description = description

    @property
    def group(self) -> Group:
        return self._group

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def entity(self) -> str:
        return self._entity

    @property
    def description(self) -> str:
        return self._description

    def __str__(self) -> str:
        return self._description

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(group={self._group.value!r}, kind={self._kind.value!r}, "
            f"entity={self._entity!r}, description={self._description!r})"
        )

    def _key(self) -> tuple[Group, Kind, str, str]:
        return (self._group, self._kind, self._entity, self._description)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassifiedError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __reduce__(self):
        return (type(self), self._key())

    # Group predicates

    def is_domain(self) -> bool:
        return self._group is Group.DOMAIN

    def is_infrastructure(self) -> bool:
        return self._group is Group.INFRASTRUCTURE

    # Kind predicates

    def is_not_found(self) -> bool:
        return self._kind is Kind.NOT_FOUND

    def is_already_exists(self) -> bool:
        return self._kind is Kind.ALREADY_EXISTS

    def is_out_of_range(self) -> bool:
        return self._kind is Kind.OUT_OF_RANGE

    def is_invalid_format(self) -> bool:
        return self._kind is Kind.INVALID_FORMAT

    def is_required(self) -> bool:
        return self._kind is Kind.REQUIRED

    # Factories

    @classmethod
    def domain(cls, entity: str, description: str) -> ClassifiedError:
        """Generic business-rule violation; the description is used verbatim."""
        return cls(Group.DOMAIN, Kind.NONE, entity, description)

    @classmethod
    def infrastructure(cls, description: str) -> ClassifiedError:
        """Failure originating outside the domain (storage, network, third parties)."""
        return cls(Group.INFRASTRUCTURE, Kind.NONE, "", description)

    @classmethod
    def not_found(cls, entity: str = "") -> ClassifiedError:
        return cls(Group.DOMAIN, Kind.NOT_FOUND, entity, _prefix(entity, " ") + "not found")

    @classmethod
    def already_exists(cls, entity: str = "") -> ClassifiedError:
        return cls(
            Group.DOMAIN, Kind.ALREADY_EXISTS, entity, _prefix(entity, " ") + "already exists"
        )

    @classmethod
    def out_of_range(cls, entity: str, lower: int, upper: int) -> ClassifiedError:
        """Value outside ``[lower, upper)``. The bounds are not checked against each other."""
        return cls(
            Group.DOMAIN,
            Kind.OUT_OF_RANGE,
            entity,
            _prefix(entity, " is ") + f"out of range [{lower},{upper})",
        )

    @classmethod
    def invalid_format(cls, entity: str, *expected: str) -> ClassifiedError:
        """Value that does not match any of the ``expected`` type labels.

        Labels are joined with ``,`` as given, empty labels included.
        """
        return cls(
            Group.DOMAIN,
            Kind.INVALID_FORMAT,
            entity,
            _prefix(entity, " contains an ") + f"invalid format, expected [{','.join(expected)}]",
        )

    @classmethod
    def required(cls, entity: str = "") -> ClassifiedError:
        return cls(Group.DOMAIN, Kind.REQUIRED, entity, _prefix(entity, " is ") + "required")


def _prefix(entity: str, joiner: str) -> str:
    # Empty entities switch every template to its entity-free form.
    return entity + joiner if entity else ""

# ABOUTME: Entity wrapping protocol shared by every Contentful resource
# ABOUTME: Deep-copies API data, freezes sys, and wraps paginated collections

"""
Entity wrapping for Contentful Management API responses.

=============================================================================
WHAT IS THIS FILE?
=============================================================================

Every successful API call returns JSON that is turned into an Entity by a
wrap function:

    team = wrap_team(http, response)

Wrapping does four things:

1. COPIES the response, so the caller's dict and the entity never share
   mutable state.
2. FREEZES sys. Server metadata (id, version, links) is exposed as a
   read-only mapping; assigning entity.sys or mutating it raises.
3. BINDS METHODS. Subclasses add update()/delete()/publish()... that use
   the HttpClient the entity was wrapped with. They never mutate the
   receiver; each returns a freshly wrapped entity from the server response.
4. SNAPSHOTS. to_plain_object() returns a detached, fully mutable dict.

Field data stays mutable so it can be edited before update():

    team.name = "Renamed"
    team = await team.update()

Collections use the same protocol through wrap_collection(wrap_fn).
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from contentful_management.utils.http import HttpClient

E = TypeVar("E", bound="Entity")


# =============================================================================
# SYS FREEZING
# =============================================================================


def freeze_sys(value: Any) -> Any:
    """
    Recursively freeze a sys structure.

    dicts become read-only MappingProxyType views and lists become tuples,
    so neither sys itself nor any nested link can be modified.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_sys(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_sys(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of freeze_sys: plain, mutable dicts and lists."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


# =============================================================================
# ENTITY
# =============================================================================


class Entity:
    """
    Base class for wrapped Contentful resources.

    Data keys are reachable as attributes (team.name) and as items
    (asset["fields"]). Names that collide with methods (e.g. a field called
    "update") are only reachable as items.
    """

    # Keys under which the entity stores its own state
    _SLOTS = frozenset(["_http", "_sys", "_data"])

    def __init__(self, http: HttpClient, data: Mapping[str, Any]) -> None:
        # thaw() also unfreezes a sys taken from another entity
        plain = copy.deepcopy(thaw(data))
        sys = plain.pop("sys", None) or {}
        object.__setattr__(self, "_http", http)
        object.__setattr__(self, "_sys", freeze_sys(sys))
        object.__setattr__(self, "_data", plain)

    # -------------------------------------------------------------------------
    # SYS (read-only)
    # -------------------------------------------------------------------------

    @property
    def sys(self) -> Mapping[str, Any]:
        return self._sys

    @sys.setter
    def sys(self, value: Any) -> None:
        raise AttributeError("sys is read-only")

    @property
    def id(self) -> str | None:
        return self._sys.get("id")

    @property
    def version(self) -> int | None:
        return self._sys.get("version")

    def _link_id(self, key: str) -> str:
        """Id of a sys link such as sys.space or sys.team."""
        try:
            return self._sys[key]["sys"]["id"]
        except (KeyError, TypeError):
            raise ValueError(f"{type(self).__name__} has no sys.{key} link") from None

    # -------------------------------------------------------------------------
    # FIELD ACCESS
    # -------------------------------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        # Only called when normal lookup fails, i.e. for data keys
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "sys":
            raise AttributeError("sys is read-only")
        if name in self._SLOTS or hasattr(type(self), name):
            object.__setattr__(self, name, value)
            return
        self._data[name] = value

    def __delattr__(self, name: str) -> None:
        if name == "sys":
            raise AttributeError("sys is read-only")
        try:
            del self._data[name]
        except KeyError:
            raise AttributeError(name) from None

    def __getitem__(self, key: str) -> Any:
        if key == "sys":
            return self._sys
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if key == "sys":
            raise TypeError("sys is read-only")
        self._data[key] = value

    def __contains__(self, key: object) -> bool:
        return key == "sys" or key in self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self.to_plain_object() == other.to_plain_object()

    __hash__ = None  # type: ignore[assignment]

    def __deepcopy__(self, memo: dict[int, Any]) -> Entity:
        # sys is immutable and the HTTP client is shared; only data is copied
        clone = object.__new__(type(self))
        for name in self._SLOTS:
            object.__setattr__(clone, name, getattr(self, name))
        object.__setattr__(clone, "_data", copy.deepcopy(self._data, memo))
        return clone

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r} version={self.version!r}>"

    # -------------------------------------------------------------------------
    # SNAPSHOTS
    # -------------------------------------------------------------------------

    def to_plain_object(self) -> dict[str, Any]:
        """Detached deep copy of the entity, sys included."""
        return {"sys": thaw(self._sys), **copy.deepcopy(self._data)}

    def _payload(self) -> dict[str, Any]:
        """Deep copy of the non-sys data, as sent by update()."""
        return copy.deepcopy(self._data)

    def _version_headers(self) -> dict[str, str]:
        return {"X-Contentful-Version": str(self.version or 0)}

    # -------------------------------------------------------------------------
    # SHARED INSTANCE ACTIONS
    # -------------------------------------------------------------------------

    async def _put_entity(
        self: E,
        path: str,
        payload: Any,
        headers: Mapping[str, str] | None = None,
        http: HttpClient | None = None,
    ) -> E:
        http = http or self._http
        data = await http.put(path, payload, headers={**self._version_headers(), **(headers or {})})
        return type(self)(http, data)

    async def _delete_entity(
        self,
        path: str,
        headers: Mapping[str, str] | None = None,
        http: HttpClient | None = None,
    ) -> None:
        await (http or self._http).delete(path, headers=headers)


# =============================================================================
# COLLECTION
# =============================================================================


class Collection(Generic[E]):
    """
    A wrapped, paginated list response.

    API collections look like:
        {"sys": {"type": "Array"}, "total": 120, "skip": 0, "limit": 100, "items": [...]}

    Each item is wrapped with the same wrap function as a single fetch.
    """

    def __init__(self, data: Mapping[str, Any], items: list[E]) -> None:
        self._sys = freeze_sys(data.get("sys") or {"type": "Array"})
        self.total: int = data.get("total", len(items))
        self.skip: int = data.get("skip", 0)
        self.limit: int = data.get("limit", len(items))
        self.items = items
        self._extra = copy.deepcopy(
            {k: v for k, v in data.items() if k not in ("sys", "total", "skip", "limit", "items")}
        )

    @property
    def sys(self) -> Mapping[str, Any]:
        return self._sys

    def __iter__(self) -> Iterator[E]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> E:
        return self.items[index]

    def __repr__(self) -> str:
        return f"<Collection total={self.total} skip={self.skip} limit={self.limit} items={len(self.items)}>"

    def __deepcopy__(self, memo: dict[int, Any]) -> Collection[E]:
        clone = copy.copy(self)
        clone.items = copy.deepcopy(self.items, memo)
        clone._extra = copy.deepcopy(self._extra, memo)
        return clone

    @property
    def has_more(self) -> bool:
        """True when later pages exist beyond this one."""
        return self.skip + len(self.items) < self.total

    def to_plain_object(self) -> dict[str, Any]:
        return {
            "sys": thaw(self._sys),
            "total": self.total,
            "skip": self.skip,
            "limit": self.limit,
            "items": [item.to_plain_object() for item in self.items],
            **copy.deepcopy(self._extra),
        }


WrapFn = Callable[["HttpClient", Mapping[str, Any]], E]


def wrap_collection(wrap_fn: WrapFn[E]) -> Callable[[HttpClient, Mapping[str, Any]], Collection[E]]:
    """
    Build a collection wrapper from a single-entity wrapper.

    Example:
        wrap_team_collection = wrap_collection(wrap_team)
        teams = wrap_team_collection(http, response)
    """

    def wrap(http: HttpClient, data: Mapping[str, Any]) -> Collection[E]:
        items = [wrap_fn(http, item) for item in data.get("items") or []]
        return Collection(data, items)

    return wrap

"""Tagged unions for Telegram's "one of several shapes" fields.

The Bot API rarely tags its unions on the wire: an ``InlineQueryResult`` is
just one of twenty JSON objects, a ``thumb`` is either an uploaded file or a
string.  :class:`TaggedUnion` models such a field as a closed, ordered list
of candidate shapes.  Decoding validates the input against each candidate in
declared order and keeps the first one that accepts it; encoding emits the
held value alone, with no wrapper and no discriminant key.

First-match is deliberate and must not become best-match: a candidate whose
required fields are a subset of a later candidate's will shadow it.  Every
``InputMedia*`` shape, for instance, requires only ``type`` and ``media``, so
any ``InputMedia`` payload decodes as the first declared variant.

Usage::

    from botapi.unions import Either, TaggedUnion

    class Shape(TaggedUnion):
        variants = (("circle", Circle), ("square", Square))

    shape = Shape.decode({"radius": 2})
    shape.tag    # "circle"
    shape.encode()  # {"radius": 2}

    thumb = Either[InputFile, str].right("attach://thumb")
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, ClassVar, Dict, Tuple, Type, TypeVar

from pydantic import BaseModel, GetCoreSchemaHandler, TypeAdapter, ValidationError
from pydantic_core import core_schema

from botapi.exceptions import UnionDecodeError
from botapi.logger import BotApiLogger

logger = BotApiLogger.get_logger()

U = TypeVar("U", bound="TaggedUnion")


@lru_cache(maxsize=None)
def type_adapter(candidate: Any) -> TypeAdapter:
    """Return a cached :class:`TypeAdapter` for *candidate*."""
    return TypeAdapter(candidate)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def _is_wrappable(candidate: Any) -> bool:
    """True when instances can be matched against *candidate* with ``isinstance``."""
    return isinstance(candidate, type) and candidate is not Any


def _holds(candidate: Any, value: Any) -> bool:
    """True when *value* is already of type *candidate*."""
    if candidate is Any:
        return True
    if isinstance(candidate, type) and issubclass(candidate, (BaseModel, TaggedUnion)):
        return isinstance(value, candidate)
    try:
        type_adapter(candidate).validate_python(value, strict=True)
    except ValidationError:
        return False
    return True


def _dump(value: Any, candidate: Any, mode: str, by_alias: bool, exclude_none: bool) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode=mode, by_alias=by_alias, exclude_none=exclude_none)
    if isinstance(value, TaggedUnion):
        return value.encode(mode=mode, by_alias=by_alias, exclude_none=exclude_none)
    return type_adapter(candidate).dump_python(
        value, mode=mode, by_alias=by_alias, exclude_none=exclude_none
    )


class TaggedUnion:
    """A value holding exactly one of a closed, ordered set of candidate shapes.

    Subclasses declare ``variants`` as ``(tag, candidate)`` pairs in priority
    order.  A candidate is any type pydantic can validate: a model class or
    a primitive such as ``str``.

    Attributes:
        tag: Name of the populated variant.
        value: The held, fully typed value.
    """

    variants: ClassVar[Tuple[Tuple[str, Any], ...]] = ()

    def __init__(self, tag: str, value: Any) -> None:
        """Hold *value* under *tag*.

        Raises:
            ValueError: If the union has no variant *tag*.
            TypeError: If *value* is not of that variant's candidate type.
        """
        candidate = self.candidate(tag)
        if not _holds(candidate, value):
            raise TypeError(
                f"{type(self).__name__}.{tag} expects {_type_name(candidate)}, "
                f"got {type(value).__name__}"
            )
        self.tag = tag
        self.value = value

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        tags = [tag for tag, _ in cls.variants]
        if len(set(tags)) != len(tags):
            raise TypeError(f"{cls.__name__} declares duplicate variant tags: {tags}")

    # ------------------------------------------------------------------
    #  Variant lookup
    # ------------------------------------------------------------------

    @classmethod
    def tags(cls) -> Tuple[str, ...]:
        """Variant tags in priority order."""
        return tuple(tag for tag, _ in cls.variants)

    @classmethod
    def candidate(cls, tag: str) -> Any:
        """Return the candidate type registered under *tag*.

        Raises:
            ValueError: If the union has no such variant.
        """
        for name, candidate in cls.variants:
            if name == tag:
                return candidate
        raise ValueError(f"{cls.__name__} has no variant {tag!r}")

    # ------------------------------------------------------------------
    #  Construction
    # ------------------------------------------------------------------

    @classmethod
    def wrap(cls: Type[U], value: Any) -> U:
        """Tag an already-built *value* by its own class.

        The exact class wins over a base class, so the caller's choice of
        shape is kept even where shape matching would pick another variant.

        Raises:
            TypeError: If *value* is an instance of none of the candidates.
        """
        if isinstance(value, cls):
            return value
        classes = [(tag, c) for tag, c in cls.variants if _is_wrappable(c)]
        for tag, candidate in classes:
            if type(value) is candidate:
                return cls(tag, value)
        for tag, candidate in classes:
            if isinstance(value, candidate):
                return cls(tag, value)
        raise TypeError(f"{type(value).__name__} is not a candidate of {cls.__name__}")

    @classmethod
    def decode(cls: Type[U], data: Any) -> U:
        """Decode raw JSON-like *data* into the first candidate that accepts it.

        Each candidate is validated strictly: a missing required field or a
        wrong primitive type rejects it, unknown keys are ignored.

        Raises:
            UnionDecodeError: If no candidate accepts *data*.
        """
        errors: Dict[str, Exception] = {}
        for tag, candidate in cls.variants:
            try:
                value = type_adapter(candidate).validate_python(data, strict=True)
            except ValidationError as exc:
                errors[tag] = exc
                logger.debug(
                    "Union candidate rejected",
                    extra={"union": cls.__name__, "candidate": tag, "error_count": exc.error_count()},
                )
                continue
            return cls(tag, value)

        logger.warning(
            "No matching union variant",
            extra={"union": cls.__name__, "candidates": list(cls.tags())},
        )
        raise UnionDecodeError(cls.__name__, list(cls.tags()), data, errors)

    # ------------------------------------------------------------------
    #  Encoding
    # ------------------------------------------------------------------

    def encode(self, *, mode: str = "json", by_alias: bool = True, exclude_none: bool = True) -> Any:
        """Return the held value's own payload, without tag or wrapper."""
        return _dump(self.value, self.candidate(self.tag), mode, by_alias, exclude_none)

    # ------------------------------------------------------------------
    #  pydantic integration
    # ------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=True
            ),
        )

    @classmethod
    def _coerce(cls: Type[U], value: Any) -> U:
        if isinstance(value, cls):
            return value
        if isinstance(value, TaggedUnion):
            value = value.value
        if isinstance(value, BaseModel):
            try:
                return cls.wrap(value)
            except TypeError as exc:
                raise ValueError(str(exc)) from exc
        return cls.decode(value)

    @staticmethod
    def _serialize(union: TaggedUnion, info: core_schema.SerializationInfo) -> Any:
        return union.encode(
            mode=info.mode,
            by_alias=bool(info.by_alias),
            exclude_none=info.exclude_none,
        )

    # ------------------------------------------------------------------
    #  Dunder helpers
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaggedUnion):
            return NotImplemented
        return type(self) is type(other) and self.tag == other.tag and self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.tag}({self.value!r})"


class Either(TaggedUnion):
    """Two-candidate union tagged ``left`` / ``right``.

    Parameterise it with the two candidate types; the left one is tried
    first when decoding::

        Thumb = Either[InputFile, str]
        Thumb.decode("file_id")      # Thumb.right("file_id")
        Thumb.left(InputFile()).encode()   # {}

    The bare ``Either`` accepts anything on either side and is only useful
    for building values programmatically.
    """

    variants = (("left", Any), ("right", Any))

    def __class_getitem__(cls, params: Any) -> Type["Either"]:
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError("Either takes exactly two candidate types")
        return _parameterize(*params)

    @classmethod
    def left(cls, value: Any) -> "Either":
        return cls("left", value)

    @classmethod
    def right(cls, value: Any) -> "Either":
        return cls("right", value)

    @property
    def is_left(self) -> bool:
        return self.tag == "left"


@lru_cache(maxsize=None)
def _parameterize(left: Any, right: Any) -> Type[Either]:
    name = f"Either[{_type_name(left)}, {_type_name(right)}]"
    return type(name, (Either,), {"variants": (("left", left), ("right", right)), "__module__": __name__})

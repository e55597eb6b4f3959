from typing import Optional, Union

from gradle_docs.common.doc_links import DocLinks
from gradle_docs.common.errors import InvalidArgumentError
from gradle_docs.common.logging import get_logger
from gradle_docs.common.version import GradleVersion


def _require(name: str, value) -> str:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")
    return value


def qualified_type_name(type_name: Union[str, type]) -> str:
    """
    Resolve the name used in DSL reference pages.

    Strings are used verbatim. Classes resolve to '<module>.<qualname>',
    or the bare qualname for builtins.
    """
    if isinstance(type_name, type):
        if type_name.__module__ == "builtins":
            return type_name.__qualname__
        return f"{type_name.__module__}.{type_name.__qualname__}"
    return _require("type_name", type_name)


class DocumentationLocator:
    """Locates documentation for various Gradle features."""

    __slots__ = ("_base_url",)

    def __init__(self, version: Optional[Union[GradleVersion, str]] = None):
        if version is None:
            version = GradleVersion.current()
        object.__setattr__(self, "_base_url", DocLinks.BASE_URL.format(version=version))
        get_logger("locator").debug(f"Documentation base URL: {self._base_url}")

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    @property
    def base_url(self) -> str:
        return self._base_url

    def documentation_for(self, id: str, section: Optional[str] = None) -> str:
        """
        Returns the user guide location for the given feature, referenced by id.
        When a section is given it is appended as the URL fragment.
        """
        url = DocLinks.USERGUIDE.format(base_url=self._base_url, id=_require("id", id))
        if section is None:
            return url
        return f"{url}#{_require('section', section)}"

    def dsl_reference_for(self, type_name: Union[str, type], property: str) -> str:
        name = qualified_type_name(type_name)
        return DocLinks.DSL_PROPERTY.format(
            base_url=self._base_url,
            type_name=name,
            property=_require("property", property),
        )

    def sample_index(self) -> str:
        return DocLinks.SAMPLE_INDEX.format(base_url=self._base_url)

    def sample_for(self, id: str) -> str:
        return DocLinks.SAMPLE.format(base_url=self._base_url, id=_require("id", id))

    def documentation_recommendation_for(self, topic: str, id: str, section: Optional[str] = None) -> str:
        """Returns a sentence pointing the reader at the user guide, for use in error messages."""
        topic = _require("topic", topic)
        return DocLinks.RECOMMENDATION.format(
            topic=f" on {topic}" if topic else "",
            url=self.documentation_for(id, section),
        )

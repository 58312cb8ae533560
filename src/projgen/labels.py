"""Build target labels.

A label names a build target, e.g. ``//app/ios:Main``. Labels are carried
around as opaque strings; the only structure extracted here is the package
path and the target name.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class BuildLabel:
    """A build target label.

    Attributes:
        value: The raw label string.
    """

    value: str

    @property
    def package_name(self) -> str | None:
        """Return the package path component of the label.

        ``//pkg/sub:target`` and ``//pkg/sub`` both yield ``pkg/sub``;
        ``//:target`` yields the root package ``""``. Bare paths such as
        ``pkg/sub`` are treated as package labels.

        Returns:
            The package path, or None when the label has no usable package
            (blank, more than one ``:``, or an external repository label).
        """
        value = self.value.strip()
        if not value or value.startswith("@"):
            return None

        components = value.split(":")
        if len(components) > 2:  # noqa: PLR2004
            return None

        package = components[0].removeprefix("//")
        if len(components) == 1 and not package:
            return None
        return package.rstrip("/")

    @property
    def target_name(self) -> str | None:
        """Return the target component of the label.

        Returns:
            The name after ``:``, or the last path component when the label
            uses the implicit target form. None if that would be empty.
        """
        _, sep, target = self.value.partition(":")
        if not sep:
            target = self.value.rstrip("/").rsplit("/", 1)[-1]
        return target or None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class RuleInfo:
    """A build rule discovered for a label.

    Attributes:
        label: The label naming the rule.
        type: The rule kind, e.g. ``ios_application``.
    """

    label: BuildLabel
    type: str

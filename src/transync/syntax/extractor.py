"""Translation key extraction from Blade markup.

Recognizes the call shapes Laravel views use to look up translations:

    {{ __('welcome.title') }}
    {!! trans('welcome.body', ['name' => $name]) !!}
    @lang('nav.home')
    __('footer.copy')

Only the first argument matters, and only when it is one quoted literal.
Variables, concatenations and unterminated literals are skipped: they
contribute no key and never abort the scan.

Architecture:
    A compiled regular expression locates candidate call openings (function
    name plus opening parenthesis, preceded by a non-word boundary). From
    each opening the string literal scanner reads the first argument with
    EscapeMode.KEY. Scanning resumes after the literal so text inside a key
    is never mistaken for another call.
"""

import logging
import re
from collections.abc import Iterable

from transync.constants import DIRECTIVE_FUNCTIONS, TRANSLATION_FUNCTIONS
from transync.diagnostics import DiagnosticCode
from transync.enums import EscapeMode
from transync.model import CallSite, Span
from transync.syntax.cursor import Cursor
from transync.syntax.scanner import get_last_parse_error, scan_string_literal
from transync.types import MarkupSource, TranslationKey

__all__ = ["KeyExtractor", "extract_keys"]

logger = logging.getLogger(__name__)

# Characters that may follow the first argument of a recognized call.
_ARGUMENT_TERMINATORS: tuple[str, ...] = (",", ")")


def _build_call_pattern(
    functions: Iterable[str], directives: Iterable[str]
) -> re.Pattern[str]:
    """Compile the regex matching the opening of a translation call.

    Functions match after any non-word character (so inside {{ }}, {!! !!},
    behind @ or bare). Directives only match behind a single @; Blade's
    @@ escape prints the directive literally and is not a call.
    """
    alternatives: list[str] = []
    function_names = sorted(functions, key=len, reverse=True)
    directive_names = sorted(directives, key=len, reverse=True)
    if function_names:
        names = "|".join(re.escape(name) for name in function_names)
        alternatives.append(rf"(?<!\w)(?P<function>{names})\(")
    if directive_names:
        names = "|".join(re.escape(name) for name in directive_names)
        alternatives.append(rf"(?<![\w@])@(?P<directive>{names})\(")
    if not alternatives:
        msg = "At least one translation function or directive name is required"
        raise ValueError(msg)
    return re.compile("|".join(alternatives))


class KeyExtractor:
    """Scans markup for translation calls and collects their literal keys.

    Thread-safe: holds only the compiled pattern, all scan state is local.

    Keys follow PHP single-quote rules: only \\\\ and \\<quote> are escapes,
    so any other backslash pair such as \\n stays two characters in the key.

    Attributes:
        functions: Helper function names recognized anywhere (default: __, trans)
        directives: Directive names recognized behind @ (default: lang)

    Example:
        >>> extractor = KeyExtractor()
        >>> extractor.extract("{{ __('b') }} @lang('a') {{ __('b') }}")
        ['a', 'b']
    """

    __slots__ = ("_directives", "_functions", "_pattern")

    def __init__(
        self,
        *,
        functions: Iterable[str] | None = None,
        directives: Iterable[str] | None = None,
    ) -> None:
        """Initialize extractor with optional custom call names.

        Args:
            functions: Function names (default: TRANSLATION_FUNCTIONS)
            directives: Directive names (default: DIRECTIVE_FUNCTIONS)

        Raises:
            ValueError: If no names are given at all, or a name is empty
        """
        self._functions = tuple(functions if functions is not None else TRANSLATION_FUNCTIONS)
        self._directives = tuple(
            directives if directives is not None else DIRECTIVE_FUNCTIONS
        )
        if any(not name for name in (*self._functions, *self._directives)):
            msg = "Translation function and directive names must be non-empty"
            raise ValueError(msg)
        self._pattern = _build_call_pattern(self._functions, self._directives)

    @property
    def functions(self) -> tuple[str, ...]:
        """Recognized helper function names."""
        return self._functions

    @property
    def directives(self) -> tuple[str, ...]:
        """Recognized directive names."""
        return self._directives

    def find_call_sites(self, markup: MarkupSource) -> tuple[CallSite, ...]:
        """Locate every recognized translation call, in source order.

        Calls whose first argument is not a usable literal are included with
        key=None and a reason, so tooling can report them.

        Args:
            markup: Blade template text

        Returns:
            Tuple of CallSite, extracted and skipped alike
        """
        sites: list[CallSite] = []
        pos = 0

        while (match := self._pattern.search(markup, pos)) is not None:
            groups = match.groupdict()
            name = groups.get("function") or groups.get("directive") or ""
            site = self._read_call(markup, name, match.start(), match.end())
            sites.append(site)

            if site.skipped:
                logger.debug(
                    "Skipped %s() call at offset %d: %s",
                    name,
                    site.span.start,
                    site.reason.name if site.reason else "unknown",
                )
            # Resume after the literal so its content is never re-scanned
            pos = max(site.span.end, match.end())

        return tuple(sites)

    def _read_call(
        self, markup: MarkupSource, name: str, start: int, open_paren_end: int
    ) -> CallSite:
        """Read the first argument of one call opening."""
        result = scan_string_literal(Cursor(markup, open_paren_end), EscapeMode.KEY)

        if result is None:
            error = get_last_parse_error()
            reason = (
                error.code
                if error is not None and error.code is DiagnosticCode.UNTERMINATED_LITERAL
                else DiagnosticCode.NON_LITERAL_ARGUMENT
            )
            return CallSite(name, None, Span(start, open_paren_end), reason)

        after = result.cursor.skip_whitespace()
        if after.is_eof or after.current not in _ARGUMENT_TERMINATORS:
            # e.g. __('prefix.' . $name): the key is an expression
            return CallSite(
                name,
                None,
                Span(start, open_paren_end),
                DiagnosticCode.NON_LITERAL_ARGUMENT,
            )

        span = Span(start, result.cursor.pos)
        if not result.value:
            return CallSite(name, None, span, DiagnosticCode.EMPTY_KEY)
        return CallSite(name, result.value, span)

    def extract(self, markup: MarkupSource) -> list[TranslationKey]:
        """Extract the sorted, deduplicated keys referenced by markup.

        Args:
            markup: Blade template text

        Returns:
            Distinct keys in ascending order (possibly empty)
        """
        keys = {site.key for site in self.find_call_sites(markup) if site.key is not None}
        return sorted(keys)


def extract_keys(markup: MarkupSource) -> list[TranslationKey]:
    """Extract translation keys from markup.

    Convenience function for KeyExtractor().extract() with default names.

    Args:
        markup: Blade template text

    Returns:
        Distinct keys in ascending order (possibly empty)

    Example:
        >>> extract_keys("{{ __('welcome.title') }} __('footer.copy')")
        ['footer.copy', 'welcome.title']
    """
    return KeyExtractor().extract(markup)

"""Tag-driven snippet dispatch.

A snippet either inserts its (transformed) body, or runs something and
optionally inserts the result. Which of these happens is fixed by the
snippet's ``kind``, derived from its tags when the snippet is built.

Function snippets run, in order of preference:
1. The single source block in the snippet body, if the body is not empty
2. The capability registered under the snippet's name
"""

from __future__ import annotations

import ast
import logging
import re
import textwrap
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from snipdeck.host.capabilities import CapabilityRegistry
from snipdeck.host.protocols import InsertionTarget, TemplateEngine
from snipdeck.lib.errors import (
    FunctionNotFoundError,
    NoExecutableBlockError,
    SnippetExecutionError,
)
from snipdeck.models.snippet import IndentMode, Snippet, SnippetKind
from snipdeck.snippets.transform import TextTransformer

logger = logging.getLogger(__name__)

EMPTY_SNIPPET_NOTICE = "Snippet has no text"

BlockEvaluator = Callable[[str], Any]


@dataclass(frozen=True)
class SourceBlock:
    """A ``#+begin_src`` block extracted from a snippet body."""

    language: str
    code: str


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of dispatching one snippet.

    Attributes:
        snippet: The snippet that was dispatched
        kind: Behavior variant that ran
        inserted_text: Text handed to the destination, if any
        indent_mode: Indentation directive used for the insertion
        value: Return value of the capability or block (function kinds only)
        notice: Non-fatal message for the user, such as an empty body
    """

    snippet: Snippet
    kind: SnippetKind
    inserted_text: str | None = None
    indent_mode: IndentMode | None = None
    value: Any = None
    notice: str | None = None


def evaluate_python(code: str) -> Any:
    """Run a Python block and return the value of its trailing expression.

    Blocks that do not end in an expression statement return None.
    """
    module = ast.parse(code, filename="<snippet>", mode="exec")
    tail: ast.Expression | None = None
    if module.body and isinstance(module.body[-1], ast.Expr):
        tail = ast.Expression(module.body.pop().value)

    namespace: dict[str, Any] = {"__name__": "__snippet__"}
    exec(compile(module, "<snippet>", "exec"), namespace)
    if tail is None:
        return None
    return eval(compile(tail, "<snippet>", "eval"), namespace)


DEFAULT_EVALUATORS: dict[str, BlockEvaluator] = {
    "python": evaluate_python,
    "py": evaluate_python,
}


class SnippetDispatcher:
    """Executes a snippet's behavior against a destination.

    The dispatcher holds no per-call state; one instance serves every
    snippet of every category.

    Attributes:
        transformer: Text preparation used for plain-text snippets
        registry: Capabilities available to function snippets
        template_engine: Optional engine used instead of plain insertion
    """

    SOURCE_BLOCK_PATTERN = re.compile(
        r"\A\s*#\+begin_src(?:[ \t]+(?P<lang>[^\s]+))?[^\n]*\n"
        r"(?P<code>.*?)"
        r"^[ \t]*#\+end_src[ \t]*\s*\Z",
        re.IGNORECASE | re.DOTALL | re.MULTILINE,
    )
    BEGIN_SRC_PATTERN = re.compile(r"^[ \t]*#\+begin_src", re.IGNORECASE | re.MULTILINE)

    def __init__(
        self,
        respect_context_depth: bool = True,
        registry: CapabilityRegistry | None = None,
        template_engine: TemplateEngine | None = None,
        evaluators: Mapping[str, BlockEvaluator] | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            respect_context_depth: Passed through to the text transformer
            registry: Capabilities for func/results snippets
            template_engine: Optional templating collaborator
            evaluators: Source block evaluators by language name
        """
        self.registry = registry if registry is not None else CapabilityRegistry()
        self.template_engine = template_engine
        self.transformer = TextTransformer(
            respect_context_depth=respect_context_depth,
            template_engine_active=template_engine is not None,
        )
        self._evaluators = dict(
            DEFAULT_EVALUATORS if evaluators is None else evaluators
        )

    def dispatch(self, snippet: Snippet, target: InsertionTarget) -> DispatchResult:
        """Run ``snippet`` against ``target``.

        Raises:
            FunctionNotFoundError: Function snippet with no body and no capability
            NoExecutableBlockError: Function snippet whose body is not a source block
        """
        logger.debug(f"Dispatching snippet '{snippet.name}' as {snippet.kind.value}")

        if snippet.kind == SnippetKind.PLAIN_TEXT:
            return self._insert_text(snippet, target)

        value = self._call(snippet)
        if snippet.kind == SnippetKind.FUNCTION_CALL:
            return DispatchResult(snippet=snippet, kind=snippet.kind, value=value)

        rendered = "" if value is None else str(value)
        target.insert(rendered, IndentMode.NONE)
        return DispatchResult(
            snippet=snippet,
            kind=snippet.kind,
            inserted_text=rendered,
            indent_mode=IndentMode.NONE,
            value=value,
        )

    def source_block(self, snippet: Snippet) -> SourceBlock:
        """Extract the single source block that makes up a snippet's body.

        Raises:
            NoExecutableBlockError: If the body is anything else
        """
        content = snippet.content or ""
        match = self.SOURCE_BLOCK_PATTERN.match(content)
        if match is None:
            raise NoExecutableBlockError(
                snippet.name, "body is not a single #+begin_src block"
            )

        code = match.group("code")
        if self.BEGIN_SRC_PATTERN.search(code):
            raise NoExecutableBlockError(snippet.name, "body holds more than one block")

        language = (match.group("lang") or "").lower()
        if language not in self._evaluators:
            raise NoExecutableBlockError(
                snippet.name, f"no evaluator for language '{language or '?'}'"
            )
        return SourceBlock(language=language, code=textwrap.dedent(code))

    def _call(self, snippet: Snippet) -> Any:
        if snippet.content is not None:
            block = self.source_block(snippet)
            try:
                return self._evaluators[block.language](block.code)
            except SyntaxError as e:
                raise NoExecutableBlockError(
                    snippet.name, f"{block.language} block does not compile: {e.msg}"
                ) from e
            except Exception as e:
                raise SnippetExecutionError(snippet.name, e) from e

        capability = self.registry.resolve(snippet.name)
        if capability is None:
            raise FunctionNotFoundError(snippet.name)
        try:
            return capability()
        except Exception as e:
            raise SnippetExecutionError(snippet.name, e) from e

    def _insert_text(self, snippet: Snippet, target: InsertionTarget) -> DispatchResult:
        if snippet.content is None:
            logger.info(f"{EMPTY_SNIPPET_NOTICE}: '{snippet.name}'")
            return DispatchResult(
                snippet=snippet, kind=snippet.kind, notice=EMPTY_SNIPPET_NOTICE
            )

        result = self.transformer.transform(
            snippet.content, target.current_depth(), snippet.tags
        )
        if self.template_engine is not None:
            self.template_engine.expand(result.text, result.indent_mode)
        else:
            target.insert(result.text, result.indent_mode)

        return DispatchResult(
            snippet=snippet,
            kind=snippet.kind,
            inserted_text=result.text,
            indent_mode=result.indent_mode,
        )

"""Check that public functions are documented, and that code blocks in docstrings are properly closed."""

import ast
import re
from pathlib import Path
from typing import NamedTuple, TypeIs

import rich
import rich.table
import rich.text

import pyoutcome as po

SRC_DIR = Path().joinpath("src", "pyoutcome")
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)", re.MULTILINE)
SKIP_DECORATORS = frozenset({"overload", "override", "no_doctest", "wraps"})

type FunctionNode = ast.FunctionDef | ast.AsyncFunctionDef


class ErrorDetail(NamedTuple):
    """Detail of an error with its line number."""

    line_no: int
    message: str


class DocstringError(NamedTuple):
    """Errors found in the docstring of a function."""

    file_path: Path
    func_name: str
    line_no: int
    errors: tuple[ErrorDetail, ...]

    @property
    def error_line_no(self) -> int:
        """Line of the first error."""
        return self.errors[0].line_no


def parse_source(file_path: Path, source: str) -> po.Outcome[ast.Module, SyntaxError]:
    """Parse **source**, keeping syntax errors as a failed outcome."""
    return po.of(lambda: ast.parse(source, filename=str(file_path)), SyntaxError)


def check_source(file_path: Path, source: str) -> list[DocstringError]:
    """Check every function defined in **source**."""

    def _syntax_error(error: SyntaxError) -> list[DocstringError]:
        line_no = error.lineno or 0
        return [
            DocstringError(
                file_path=file_path,
                func_name="<module>",
                line_no=line_no,
                errors=(ErrorDetail(line_no, f"Syntax error: {error.msg}"),),
            )
        ]

    return parse_source(file_path, source).fold(
        lambda tree: _check_tree(file_path, tree), _syntax_error
    )


def check_file(file_path: Path) -> list[DocstringError]:
    """Check every function defined in **file_path**."""
    return check_source(file_path, file_path.read_text(encoding="utf-8"))


def _check_tree(file_path: Path, tree: ast.Module) -> list[DocstringError]:
    nodes = [node for node in ast.walk(tree) if _is_documentable(node)]
    # Overrides of a method documented elsewhere in the module inherit its docstring.
    documented = {node.name for node in nodes if ast.get_docstring(node) is not None}
    return [
        error
        for node in nodes
        if not _has_skip_decorator(node)
        and (error := _process_node(file_path, node, documented)) is not None
    ]


def _is_documentable(node: ast.AST) -> TypeIs[FunctionNode]:
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))


def _is_public(name: str) -> bool:
    return not name.startswith("_") and not name.istitle()


def _has_skip_decorator(node: FunctionNode) -> bool:
    """Check if function has a decorator that should skip docstring check."""
    return any(
        (isinstance(d, ast.Name) and d.id in SKIP_DECORATORS)
        or (isinstance(d, ast.Attribute) and d.attr in SKIP_DECORATORS)
        for d in node.decorator_list
    )


def _process_node(
    file_path: Path, node: FunctionNode, documented: set[str]
) -> DocstringError | None:
    docstring = ast.get_docstring(node)
    if docstring is None:
        if _is_public(node.name) and node.name not in documented:
            return DocstringError(
                file_path=file_path,
                func_name=node.name,
                line_no=node.lineno,
                errors=(ErrorDetail(node.lineno, "Missing docstring"),),
            )
        return None

    errors = check_code_blocks(docstring, node.lineno, node.name)
    if not errors:
        return None
    return DocstringError(
        file_path=file_path,
        func_name=node.name,
        line_no=node.lineno,
        errors=tuple(errors),
    )


def check_code_blocks(
    docstring: str, start_line: int, func_name: str
) -> list[ErrorDetail]:
    """Check that all code blocks in docstring are properly closed and that at least one python block exists.

    Private functions, and docstrings containing the @no_doctest flag, don't need a python block.
    """
    marker = "```"
    errors: list[ErrorDetail] = []
    stack: list[tuple[int, str]] = []
    lines = docstring.split("\n")
    for line_num, line in enumerate(lines):
        match = CODE_BLOCK_PATTERN.search(line.strip())
        if match is None:
            continue
        if line.strip() == marker:
            if stack:
                stack.pop()
            else:
                errors.append(
                    ErrorDetail(
                        start_line + line_num,
                        "Closing block ``` without matching opening",
                    )
                )
            continue
        stack.append((line_num + 1, match.group(1) or "plaintext"))

    errors.extend(
        ErrorDetail(start_line + idx - 1, f"Unclosed ```{lang} block")
        for idx, lang in stack
    )
    has_python_block = any(
        CODE_BLOCK_PATTERN.search(line.strip()) and "python" in line for line in lines
    )
    if not (
        has_python_block or not _is_public(func_name) or "@no_doctest" in docstring
    ):
        errors.append(
            ErrorDetail(
                start_line, "Missing doctest: No ```python block found in docstring"
            )
        )
    return errors


def main() -> None:
    """Check all docstrings in the project."""
    rich.print(
        rich.text.Text(
            "Checking docstrings for properly closed code blocks...", style="cyan bold"
        )
    )
    files = sorted(SRC_DIR.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")
    all_errors = [error for path in files for error in check_file(path)]

    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    for error in all_errors:
        table.add_row(
            f"{error.file_path}:{error.error_line_no}",
            error.func_name,
            "\n".join(detail.message for detail in error.errors),
        )
    rich.print(table)
    rich.print(
        rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red")
    )
    raise SystemExit(1)


if __name__ == "__main__":
    main()

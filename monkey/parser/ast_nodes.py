"""
Abstract Syntax Tree node definitions for Monkey.

The node set is closed: every concrete node carries one ASTNodeType tag and
ASTVisitor dispatches on that tag, so adding an expression variant means
adding a tag, a class and a visit method together.

Nodes are immutable once the parser has built them. A parent owns its
children; there is no sharing between nodes and no parent pointer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Top-level
    PROGRAM = "Program"

    # Statements
    LET_STATEMENT = "LetStatement"
    RETURN_STATEMENT = "ReturnStatement"

    # Expressions
    IDENTIFIER = "Identifier"


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ClassVar[ASTNodeType]

    @abstractmethod
    def token_literal(self) -> str:
        """Literal text of the token this node is anchored on."""

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes, in source order."""

    def accept(self, visitor: 'ASTVisitor') -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)


class Statement(ASTNode):
    """A complete executable unit."""


class Expression(ASTNode):
    """A node that yields a value."""


# ============================================================================
# Top-level nodes
# ============================================================================

@dataclass(frozen=True)
class Program(ASTNode):
    """Root AST node: the program's statements in execution order."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.PROGRAM

    statements: Tuple[Statement, ...] = ()

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def children(self) -> List[ASTNode]:
        return list(self.statements)


# ============================================================================
# Expressions
# ============================================================================

@dataclass(frozen=True)
class Identifier(Expression):
    """A bound name, e.g. the ``x`` in ``let x = 5;``."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.IDENTIFIER

    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal

    def children(self) -> List[ASTNode]:
        return []


# ============================================================================
# Statements
# ============================================================================

@dataclass(frozen=True)
class LetStatement(Statement):
    """
    ``let <name> = <expression>;``

    ``value`` stays None until the parser learns to parse expressions.
    """
    node_type: ClassVar[ASTNodeType] = ASTNodeType.LET_STATEMENT

    token: Token
    name: Identifier
    value: Optional[Expression] = None

    def token_literal(self) -> str:
        return self.token.literal

    def children(self) -> List[ASTNode]:
        if self.value is None:
            return [self.name]
        return [self.name, self.value]


@dataclass(frozen=True)
class ReturnStatement(Statement):
    """
    ``return <expression>;``

    ``return_value`` stays None until the parser learns to parse expressions.
    """
    node_type: ClassVar[ASTNodeType] = ASTNodeType.RETURN_STATEMENT

    token: Token
    return_value: Optional[Expression] = None

    def token_literal(self) -> str:
        return self.token.literal

    def children(self) -> List[ASTNode]:
        if self.return_value is None:
            return []
        return [self.return_value]


# ============================================================================
# Visitors
# ============================================================================

_VISIT_METHODS: Dict[ASTNodeType, str] = {
    ASTNodeType.PROGRAM: "visit_program",
    ASTNodeType.LET_STATEMENT: "visit_let_statement",
    ASTNodeType.RETURN_STATEMENT: "visit_return_statement",
    ASTNodeType.IDENTIFIER: "visit_identifier",
}


class ASTVisitor(ABC):
    """
    Visitor over the closed node set.

    ``visit`` dispatches on the node's tag; every tag must have a
    ``visit_*`` method, so a visitor that forgets a node kind cannot be
    instantiated.
    """

    def visit(self, node: ASTNode) -> Any:
        method_name = _VISIT_METHODS.get(getattr(node, "node_type", None))
        if method_name is None:
            raise TypeError(f"Unknown AST node: {type(node).__name__}")
        return getattr(self, method_name)(node)

    @abstractmethod
    def visit_program(self, node: Program) -> Any:
        pass

    @abstractmethod
    def visit_let_statement(self, node: LetStatement) -> Any:
        pass

    @abstractmethod
    def visit_return_statement(self, node: ReturnStatement) -> Any:
        pass

    @abstractmethod
    def visit_identifier(self, node: Identifier) -> Any:
        pass


class ASTPrinter(ASTVisitor):
    """Renders a tree as indented text, one node per line."""

    def __init__(self, indent: str = "  "):
        self.indent = indent
        self._depth = 0

    def render(self, node: ASTNode) -> str:
        self._depth = 0
        return "\n".join(node.accept(self))

    def _line(self, text: str) -> str:
        return f"{self.indent * self._depth}{text}"

    def _nested(self, label: str, node: Optional[ASTNode]) -> List[str]:
        self._depth += 1
        try:
            if node is None:
                return [self._line(f"{label}: <none>")]
            lines = node.accept(self)
            lines[0] = f"{self.indent * self._depth}{label}: {lines[0].lstrip()}"
            return lines
        finally:
            self._depth -= 1

    @staticmethod
    def _anchor(token: Token) -> str:
        return f"{token.literal!r} @{token.line}:{token.column}"

    def visit_program(self, node: Program) -> List[str]:
        lines = [self._line(f"Program ({len(node.statements)} statements)")]
        self._depth += 1
        try:
            for statement in node.statements:
                lines.extend(statement.accept(self))
        finally:
            self._depth -= 1
        return lines

    def visit_let_statement(self, node: LetStatement) -> List[str]:
        lines = [self._line(f"LetStatement {self._anchor(node.token)}")]
        lines.extend(self._nested("name", node.name))
        lines.extend(self._nested("value", node.value))
        return lines

    def visit_return_statement(self, node: ReturnStatement) -> List[str]:
        lines = [self._line(f"ReturnStatement {self._anchor(node.token)}")]
        lines.extend(self._nested("return_value", node.return_value))
        return lines

    def visit_identifier(self, node: Identifier) -> List[str]:
        token = node.token
        return [self._line(f"Identifier {node.value!r} @{token.line}:{token.column}")]


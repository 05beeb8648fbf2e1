# src/monkey/monkey_ast.py

class Node:
    def token_literal(self):
        return ""


class Program(Node):
    """Root of every parse; holds top-level statements in source order."""
    def __init__(self):
        self.statements = []

    def token_literal(self):
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self):
        return "".join(str(s) for s in self.statements)

    def __repr__(self):
        return f"Program(statements={len(self.statements)})"

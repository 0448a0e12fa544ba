# tools/base_tool.py
from abc import ABC, abstractmethod
from dataclasses import dataclass

from mcp import types


@dataclass
class ToolResult:
    """Outcome of a single tool call: one text block plus an error flag."""
    text: str
    is_error: bool = False

    def to_content(self) -> list[types.TextContent]:
        return [types.TextContent(type="text", text=self.text)]


class BaseTool(ABC):
    """
    Abstract base class for all tools.
    """
    def __init__(self, name, description, input_schema=None):
        """
        Initializes the tool.
        Args:
            name (str): The name of the tool (the name the MCP client calls).
            description (str): A brief description of what the tool does.
            input_schema (dict): JSON schema of the tool arguments.
        """
        self.name = name
        self.description = description
        self.input_schema = input_schema or {"type": "object", "properties": {}, "required": []}

    @abstractmethod
    async def execute(self, arguments: dict) -> ToolResult:
        """
        Executes the tool with the given arguments.
        Args:
            arguments (dict): A dictionary of arguments for the tool,
                              as sent by the MCP client.
        Returns:
            ToolResult: The text returned to the client and whether it is an error.
        """
        pass

    def get_tool_info(self) -> types.Tool:
        """
        Returns the MCP tool definition advertised in tools/list.
        """
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )

"""Markdown fragments shared by the generated API documents."""

from rpc_api_docs.catalogue.base import Argument

BODY_HEADING = "### Request Body\n\n"


class MarkdownFormatter:
    """Renders Markdown blocks describing endpoint inputs."""

    def generate_body_block(self, args: list[Argument]) -> str:
        """Describe the request body carried by the first file argument.

        Returns an empty string when no argument is file-typed.
        """
        body_arg = next((a for a in args if a.is_file), None)
        if body_arg is None:
            return ""
        return (
            f"\n{BODY_HEADING}"
            f"Argument `{body_arg.name}` is of file type. This endpoint expects one or "
            "several files (depending on the command) in the body of the request as "
            "'multipart/form-data'.\n\n"
        )

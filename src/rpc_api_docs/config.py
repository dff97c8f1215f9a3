"""Document-level settings.

Defaults describe the Kubo RPC API. A catalogue file may override them in
its ``info:`` block, and CLI options override both.
"""

from pydantic import BaseModel, ConfigDict

DEFAULT_DESCRIPTION = (
    "When a Kubo IPFS node is running as a daemon, it exposes an HTTP RPC API "
    "that allows you to control the node and run the same commands you can "
    "from the command line.\n\n"
    "In many cases, using this RPC API is preferable to embedding IPFS directly "
    "in your program: it allows you to maintain peer connections that are "
    "longer lived than your app and you can keep a single IPFS node running "
    "instead of several if your app can be launched multiple times. In fact, "
    "the `ipfs` CLI commands use this RPC API when operating in online mode."
)

PLAIN_TEXT_RESPONSE = "This endpoint returns a `text/plain` response body."


class DocumentSettings(BaseModel):
    """Constants that shape the generated document."""

    model_config = ConfigDict(frozen=True, extra="forbid", coerce_numbers_to_str=True)

    title: str = "IPFS RPC API"
    version: str = "0.13.0"
    description: str = DEFAULT_DESCRIPTION
    docs_url: str = "https://docs.ipfs.tech/reference/kubo/rpc/"
    path_prefix: str = "/api/v0/"
    plain_text_response: str = PLAIN_TEXT_RESPONSE
    openapi_version: str = "3.0.0"
    include_removed: bool = False

    def merged(self, **overrides) -> "DocumentSettings":
        """Return a copy with every non-None override applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        return self.model_copy(update=updates)

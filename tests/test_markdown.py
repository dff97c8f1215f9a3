from rpc_api_docs.catalogue.base import Argument
from rpc_api_docs.markdown import MarkdownFormatter


class TestBodyBlock:
    def test_names_first_file_argument(self):
        args = [Argument(name="path", type="file"), Argument(name="other", type="file")]
        block = MarkdownFormatter().generate_body_block(args)
        assert "### Request Body\n\n" in block
        assert "Argument `path` is of file type." in block
        assert "`other`" not in block

    def test_empty_without_file_argument(self):
        assert MarkdownFormatter().generate_body_block([Argument(name="a", type="string")]) == ""

import io
import json
import unittest

from jsonshape import cli
from tests._util import tmp_json, tmp_text


SCHEMA = {
    "type": "object",
    "required": ["id"],
    "properties": {"id": {"type": "integer", "minimum": 1}},
}


class CliTests(unittest.TestCase):
    def setUp(self):
        self.schema = tmp_json(SCHEMA)
        self.good = tmp_json({"id": 3})
        self.bad = tmp_json({"id": 0})
        self.cleanup = [self.schema, self.good, self.bad]

    def tearDown(self):
        for p in self.cleanup:
            p.unlink(missing_ok=True)

    def run_cli(self, argv, stdin_text=""):
        out, err = io.StringIO(), io.StringIO()
        code = cli.main(argv, stdin=io.StringIO(stdin_text), stdout=out, stderr=err)
        return code, out.getvalue(), err.getvalue()

    def test_valid_document(self):
        code, out, _ = self.run_cli([str(self.schema), str(self.good)])
        self.assertEqual(code, cli.EXIT_OK)
        self.assertEqual(out.strip(), f"{self.good}: valid")

    def test_invalid_document_text_report(self):
        code, out, _ = self.run_cli([str(self.schema), str(self.good), str(self.bad)])
        self.assertEqual(code, cli.EXIT_INVALID)
        lines = out.strip().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[1], f"{self.bad}: invalid: root.id: Must be >= 1")

    def test_json_report(self):
        code, out, _ = self.run_cli([str(self.schema), str(self.bad), "--output", "json"])
        self.assertEqual(code, cli.EXIT_INVALID)
        report = json.loads(out)
        self.assertEqual(report["path"], ["id"])
        self.assertEqual(report["received"], 0)
        self.assertFalse(report["ok"])

    def test_markdown_report(self):
        code, out, _ = self.run_cli([str(self.schema), str(self.bad), "-o", "markdown"])
        self.assertEqual(code, cli.EXIT_INVALID)
        self.assertIn("## Message\nMust be >= 1", out)

    def test_stdin_document(self):
        code, out, _ = self.run_cli([str(self.schema)], stdin_text='{"id": 2}')
        self.assertEqual(code, cli.EXIT_OK)
        self.assertEqual(out.strip(), "-: valid")

    def test_bundled_schema_name(self):
        code, out, _ = self.run_cli(["person.json", "-"], stdin_text="{}")
        self.assertEqual(code, cli.EXIT_INVALID)
        self.assertIn("Missing required property 'id'", out)

    def test_missing_schema_is_an_error(self):
        code, _, err = self.run_cli(["/tmp/jsonshape-no-such-schema.json"], stdin_text="{}")
        self.assertEqual(code, cli.EXIT_ERROR)
        self.assertIn("not found", err)

    def test_malformed_schema_is_an_error(self):
        broken = tmp_json({"type": "string", "pattern": "("})
        self.cleanup.append(broken)
        code, _, err = self.run_cli([str(broken)], stdin_text='"x"')
        self.assertEqual(code, cli.EXIT_ERROR)
        self.assertIn("invalid pattern", err)

    def test_bad_json_document_is_an_error(self):
        bad_json = tmp_text("{oops")
        self.cleanup.append(bad_json)
        code, _, err = self.run_cli([str(self.schema), str(bad_json)])
        self.assertEqual(code, cli.EXIT_ERROR)
        self.assertIn("Invalid JSON", err)

    def test_bad_stdin_is_an_error(self):
        code, _, err = self.run_cli([str(self.schema)], stdin_text="nope")
        self.assertEqual(code, cli.EXIT_ERROR)
        self.assertIn("Invalid JSON on stdin", err)

    def test_arguments_from_file(self):
        args = tmp_text(f"{self.schema}\n{self.good}\n", suffix=".txt")
        self.cleanup.append(args)
        code, _, _ = self.run_cli([f"@{args}"])
        self.assertEqual(code, cli.EXIT_OK)

    def test_verbosity_is_case_insensitive(self):
        args = cli.build_arg_parser().parse_args([str(self.schema), "--verbosity", "debug"])
        self.assertEqual(args.verbosity, "DEBUG")


if __name__ == "__main__":
    unittest.main()

import pytest

from godepgraph.errors import SourceSyntaxError
from godepgraph.parser.imports import ImportExtractor


class TestImportExtractor:
    """Test import extraction from Go sources."""

    def setup_method(self):
        self.extractor = ImportExtractor()

    def test_single_import(self):
        source = 'package main\n\nimport "fmt"\n\nfunc main() {}\n'
        assert self.extractor.extract(source) == ["fmt"]

    def test_grouped_imports_keep_source_order(self):
        source = """package main

import (
    "os"
    "fmt"
    "example.com/mod/pkg"
)
"""
        assert self.extractor.extract(source) == ["os", "fmt", "example.com/mod/pkg"]

    def test_named_dot_and_blank_imports(self):
        source = """package main

import (
    f "fmt"
    . "strings"
    _ "embed"
)
"""
        assert self.extractor.extract(source) == ["fmt", "strings", "embed"]

    def test_raw_string_import(self):
        source = "package main\n\nimport `os`\n"
        assert self.extractor.extract(source) == ["os"]

    def test_multiple_import_declarations(self):
        source = """package main

import "fmt"
import "os"
"""
        assert self.extractor.extract(source) == ["fmt", "os"]

    def test_duplicates_are_preserved(self):
        source = 'package main\n\nimport "fmt"\nimport f2 "fmt"\n'
        assert self.extractor.extract(source) == ["fmt", "fmt"]

    def test_comments_in_import_section(self):
        source = """// Package main does things.
package main

// imports
import (
    "fmt" // printing
    /* block */ "os"
)
"""
        assert self.extractor.extract(source) == ["fmt", "os"]

    def test_no_imports(self):
        assert self.extractor.extract("package empty\n") == []

    def test_bytes_input(self):
        assert self.extractor.extract(b'package main\nimport "fmt"\n') == ["fmt"]

    def test_errors_after_imports_are_ignored(self):
        source = """package main

import "fmt"

func main() {
    fmt.Println("hi")
}

func broken() {
    x :=
}
"""
        assert self.extractor.extract(source, "broken.go") == ["fmt"]

    def test_missing_package_clause(self):
        with pytest.raises(SourceSyntaxError):
            self.extractor.extract('import "fmt"\n', "nopkg.go")

    def test_malformed_import_path(self):
        with pytest.raises(SourceSyntaxError) as excinfo:
            self.extractor.extract("package main\n\nimport 42\n", "bad.go")

        assert excinfo.value.path == "bad.go"
        assert "bad.go" in str(excinfo.value)

    def test_unterminated_import_group(self):
        source = """package main

import (
    "fmt"

func main() {}
"""
        with pytest.raises(SourceSyntaxError):
            self.extractor.extract(source, "unterminated.go")

    def test_invalid_utf8_in_import_path(self):
        with pytest.raises(SourceSyntaxError) as excinfo:
            self.extractor.extract(b'package main\nimport "fo\xffo"\n', "latin1.go")

        assert excinfo.value.path == "latin1.go"
        assert excinfo.value.line == 2
        assert "UTF-8" in str(excinfo.value)

    def test_stray_tokens_after_imports_are_ignored(self):
        source = 'package main\nimport "fmt"\n)\n'
        assert self.extractor.extract(source, "stray_after.go") == ["fmt"]

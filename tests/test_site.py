"""Tests for generating documentation for a whole source tree."""

import textwrap
from pathlib import Path

import pytest

from lit_doc.generators.site import LiterateDocGenerator
from lit_doc.output.markup import MarkupConverter
from lit_doc.parsers.structure import ParsedFile


@pytest.fixture(scope="module")
def converter() -> MarkupConverter:
    """Create the shared Markdown converter."""
    return MarkupConverter()


@pytest.fixture
def generator(converter: MarkupConverter) -> LiterateDocGenerator:
    """Create a generator for Clojure sources."""
    return LiterateDocGenerator(converter)


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """Create a sample Clojure source tree."""
    src = tmp_path / "src"
    pkg = src / "com" / "example"
    pkg.mkdir(parents=True)
    (pkg / "core.clj").write_text(
        textwrap.dedent("""\
            ;; # Example
            ;;
            ;; See https://example.com for "details".
            (ns com.example.core)

            (defn f []
              ;; returns *one*
              1)
        """),
        encoding="utf-8",
    )
    (pkg / "empty.clj").write_text("", encoding="utf-8")
    (src / "README.txt").write_text("ignored\n", encoding="utf-8")
    return src


class TestPlan:
    """Tests for listing pages without writing them."""

    def test_pairs(
        self, generator: LiterateDocGenerator, sample_project: Path, tmp_path: Path
    ) -> None:
        dest = tmp_path / "docs"
        pairs = generator.plan(str(sample_project), str(dest))
        assert [d.name for _, d in pairs] == [
            "com_example_core.clj.html",
            "com_example_empty.clj.html",
        ]
        assert not dest.exists()

    def test_missing_source(
        self, generator: LiterateDocGenerator, tmp_path: Path
    ) -> None:
        with pytest.raises(ValueError, match="is not a directory"):
            generator.plan(str(tmp_path / "missing"), str(tmp_path / "docs"))


class TestGenerate:
    """Tests for full documentation runs."""

    def test_writes_one_page_per_file(
        self, generator: LiterateDocGenerator, sample_project: Path, tmp_path: Path
    ) -> None:
        dest = tmp_path / "docs"
        written = generator.generate(str(sample_project), str(dest))
        assert [p.name for p in written] == [
            "com_example_core.clj.html",
            "com_example_empty.clj.html",
        ]
        assert sorted(p.name for p in dest.iterdir()) == [
            "com_example_core.clj.html",
            "com_example_empty.clj.html",
        ]

    def test_page_content(
        self, generator: LiterateDocGenerator, sample_project: Path, tmp_path: Path
    ) -> None:
        dest = tmp_path / "docs"
        generator.generate(str(sample_project), str(dest))
        page = (dest / "com_example_core.clj.html").read_text(encoding="utf-8")

        assert "<h1>Example</h1>" in page
        assert '<a href="https://example.com">https://example.com</a>' in page
        assert "&ldquo;details&rdquo;" in page
        assert (
            '<pre class="code prettyprint lang-lisp">'
            "(ns com.example.core)\n\n(defn f []\n</pre>"
        ) in page
        assert '<div class="inline-comment">\n<p>returns <em>one</em></p>\n</div>' in page
        assert '<pre class="code prettyprint lang-lisp">  1)\n</pre>' in page

    def test_fragment_order(
        self, generator: LiterateDocGenerator, sample_project: Path, tmp_path: Path
    ) -> None:
        dest = tmp_path / "docs"
        generator.generate(str(sample_project), str(dest))
        page = (dest / "com_example_core.clj.html").read_text(encoding="utf-8")
        positions = [
            page.index("<h1>Example</h1>"),
            page.index("(ns com.example.core)"),
            page.index('<div class="inline-comment">'),
            page.index("  1)"),
        ]
        assert positions == sorted(positions)

    def test_empty_file_has_only_chrome(
        self, generator: LiterateDocGenerator, sample_project: Path, tmp_path: Path
    ) -> None:
        dest = tmp_path / "docs"
        generator.generate(str(sample_project), str(dest))
        page = (dest / "com_example_empty.clj.html").read_text(encoding="utf-8")
        body = page.split("<body>", 1)[1].split("</body>", 1)[0]
        assert body.strip() == ""

    def test_idempotent(
        self, generator: LiterateDocGenerator, sample_project: Path, tmp_path: Path
    ) -> None:
        dest = tmp_path / "docs"
        generator.generate(str(sample_project), str(dest))
        first = {p.name: p.read_bytes() for p in dest.iterdir()}
        generator.generate(str(sample_project), str(dest))
        second = {p.name: p.read_bytes() for p in dest.iterdir()}
        assert first == second

    def test_missing_source(
        self, generator: LiterateDocGenerator, tmp_path: Path
    ) -> None:
        with pytest.raises(ValueError, match="is not a directory"):
            generator.generate(str(tmp_path / "missing"), str(tmp_path / "docs"))
        assert not (tmp_path / "docs").exists()

    def test_undecodable_file_aborts_run(
        self, generator: LiterateDocGenerator, tmp_path: Path
    ) -> None:
        src = tmp_path / "src"
        src.mkdir()
        (src / "a.clj").write_bytes(b"\xff\xfe\xfa broken")
        with pytest.raises(UnicodeDecodeError):
            generator.generate(str(src), str(tmp_path / "docs"))

    def test_custom_extension_and_token(
        self, converter: MarkupConverter, tmp_path: Path
    ) -> None:
        src = tmp_path / "src"
        src.mkdir()
        (src / "tool.py").write_text("## Tool\nx = 1\n", encoding="utf-8")
        generator = LiterateDocGenerator(converter, extension=".py", comment_token="#")
        written = generator.generate(str(src), str(tmp_path / "docs"))
        page = written[0].read_text(encoding="utf-8")
        assert "<p>Tool</p>" in page
        assert "x = 1\n</pre>" in page


class TestRenderFile:
    """Tests for writing a single parsed file."""

    def test_empty_parsed_file(
        self, generator: LiterateDocGenerator, tmp_path: Path
    ) -> None:
        dest = tmp_path / "empty.clj.html"
        generator.render_file(dest, ParsedFile(path="empty.clj"))
        assert dest.read_text(encoding="utf-8") == generator.assembler.assemble([])

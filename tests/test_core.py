"""
Unit tests for the classification pipeline: extraction, stats, type/scope
rules, descriptions and message composition.

Run with:
    pytest tests/test_core.py -v
"""

import pytest

from smartcommit import COMMIT_TYPE_NAMES
from smartcommit.analysis import (
    ChangeStats,
    CommitType,
    Context,
    FileChange,
    Operation,
    aggregate_stats,
    classify_commit_type,
    classify_context,
    classify_scope,
    extract_change,
    extract_changes,
)
from smartcommit.git import ChangeKind, ChangeRecord, FileRevision
from smartcommit.message import (
    DescriptionGenerator,
    FALLBACK_MESSAGE,
    NO_CHANGES_MESSAGE,
    build_message,
    compose_message,
    file_detail,
    file_type_label,
    generate_commit_message,
)


def record(path, kind=ChangeKind.MODIFIED):
    """Build a ChangeRecord the way GitAnalyzer would for a single path."""
    revision = FileRevision.from_path(path)
    if kind == ChangeKind.NEW:
        return ChangeRecord(kind, after=revision)
    if kind == ChangeKind.DELETED:
        return ChangeRecord(kind, before=revision)
    return ChangeRecord(kind, before=revision, after=revision)


def changes(*specs):
    """FileChanges from (path, kind) pairs or bare paths (modified)."""
    records = [record(*s) if isinstance(s, tuple) else record(s) for s in specs]
    return extract_changes(records)


class ExplodingRevision:
    @property
    def name(self):
        raise RuntimeError("revision gone")

    @property
    def path(self):
        raise RuntimeError("revision gone")


class ExplodingRecord:
    """A change record whose every accessor fails."""

    @property
    def kind(self):
        raise RuntimeError("no kind")

    @property
    def before(self):
        raise RuntimeError("no before")

    @property
    def after(self):
        raise RuntimeError("no after")


# ---------------------------------------------------------------------------
# Context classification
# ---------------------------------------------------------------------------

class TestClassifyContext:
    """classify_context() keyword rules, first match wins."""

    @pytest.mark.parametrize("name, directory, expected", [
        ("LoginTest.java", None, Context.TEST),
        ("app.py", "tests", Context.TEST),
        ("config.yml", None, Context.CONFIG),
        ("settings.py", "config", Context.CONFIG),
        ("ApiClient.java", None, Context.API),
        ("UserAPI.java", "src", Context.API),
        ("Login.java", "auth", Context.AUTH),
        ("database.py", None, Context.DATABASE),
        ("schema.sql", "db", Context.DATABASE),
        ("Button.vue", "components", Context.UI),
        ("main.css", None, Context.STYLE),
        ("intro.md", "docs", Context.DOCS),
        ("settings.gradle", None, Context.BUILD),
        ("pom.xml", "maven", Context.BUILD),
        ("main.py", "src", Context.FILE),
    ])
    def test_rules(self, name, directory, expected):
        assert classify_context(name, directory) == expected

    @pytest.mark.parametrize("name, directory, expected", [
        pytest.param("test_config.py", None, Context.TEST, id="test-before-config"),
        pytest.param("config.py", "api", Context.CONFIG, id="config-before-api"),
        pytest.param("api.py", "auth", Context.API, id="api-before-auth"),
        pytest.param("build.gradle", None, Context.UI, id="ui-substring-before-build"),
    ])
    def test_priority(self, name, directory, expected):
        assert classify_context(name, directory) == expected

    def test_missing_name_is_file(self):
        assert classify_context(None, "auth") == Context.FILE

    def test_directory_only_match(self):
        assert classify_context("index.js", "Auth") == Context.AUTH


# ---------------------------------------------------------------------------
# ChangeFactExtractor
# ---------------------------------------------------------------------------

class TestExtractChange:

    def test_new_file_uses_after_revision(self):
        fc = extract_change(record("src/api/users.py", ChangeKind.NEW))
        assert fc == FileChange(
            file_name="users.py",
            extension="py",
            directory="api",
            operation=Operation.ADD,
            path="src/api/users.py",
            context=Context.API,
        )

    def test_deleted_file_falls_back_to_before(self):
        fc = extract_change(record("lib/old.rb", ChangeKind.DELETED))
        assert fc.file_name == "old.rb"
        assert fc.path == "lib/old.rb"
        assert fc.operation == Operation.REMOVE

    def test_moved_file_prefers_new_identity(self):
        rec = ChangeRecord(
            ChangeKind.MOVED,
            before=FileRevision.from_path("src/a/Old.java"),
            after=FileRevision.from_path("src/b/New.java"),
        )
        fc = extract_change(rec)
        assert fc.file_name == "New.java"
        assert fc.directory == "b"
        assert fc.operation == Operation.MOVE

    @pytest.mark.parametrize("kind, expected", [
        (ChangeKind.NEW, Operation.ADD),
        (ChangeKind.DELETED, Operation.REMOVE),
        (ChangeKind.MODIFIED, Operation.UPDATE),
        (ChangeKind.MOVED, Operation.MOVE),
        (ChangeKind.OTHER, Operation.MODIFY),
        ("deleted", Operation.REMOVE),
        ("renamed", Operation.MODIFY),
    ])
    def test_operation_mapping(self, kind, expected):
        rec = ChangeRecord(kind, after=FileRevision.from_path("a/b.txt"))
        assert extract_change(rec).operation == expected

    def test_extension_is_lowercased(self):
        assert extract_change(record("img/Photo.PNG")).extension == "png"

    def test_extension_uses_last_dot(self):
        assert extract_change(record("dist/app.min.JS")).extension == "js"

    def test_no_extension(self):
        assert extract_change(record("Makefile")).extension is None

    def test_top_level_file_has_no_directory(self):
        fc = extract_change(record("README.md"))
        assert fc.directory is None
        assert fc.path == "README.md"

    def test_directory_is_immediate_parent(self):
        assert extract_change(record("a/b/c/d.py")).directory == "c"

    def test_no_revisions(self):
        fc = extract_change(ChangeRecord(ChangeKind.NEW))
        assert fc.file_name is None
        assert fc.path is None
        assert fc.extension is None
        assert fc.operation == Operation.ADD
        assert fc.context == Context.FILE

    def test_failing_record_yields_absent_fields(self):
        fc = extract_change(ExplodingRecord())
        assert fc == FileChange()
        assert fc.operation == Operation.MODIFY
        assert fc.context == Context.FILE

    def test_failing_revision_keeps_operation(self):
        rec = ChangeRecord(ChangeKind.NEW, after=ExplodingRevision())
        fc = extract_change(rec)
        assert fc.file_name is None
        assert fc.operation == Operation.ADD

    def test_name_and_path_come_from_one_revision(self):
        class ShiftingRecord:
            """Each read of ``after`` yields a different revision."""
            kind = ChangeKind.MODIFIED
            before = None

            def __init__(self):
                self._revisions = iter([
                    FileRevision.from_path("api/routes.py"),
                    FileRevision.from_path("docs/guide.md"),
                ])

            @property
            def after(self):
                return next(self._revisions)

        fc = extract_change(ShiftingRecord())
        assert fc.file_name == "routes.py"
        assert fc.path == "api/routes.py"
        assert fc.directory == "api"

    def test_one_bad_record_does_not_abort_batch(self):
        records = [
            record("src/a.py"),
            ExplodingRecord(),
            record("src/b.py", ChangeKind.NEW),
        ]
        result = extract_changes(records)
        assert [fc.file_name for fc in result] == ["a.py", None, "b.py"]

    def test_accepts_any_iterable(self):
        result = extract_changes(record(p) for p in ["x/a.py", "x/b.py"])
        assert len(result) == 2


# ---------------------------------------------------------------------------
# StatsAggregator
# ---------------------------------------------------------------------------

class TestAggregateStats:

    def test_counts_extensions_and_operations(self):
        stats = aggregate_stats(changes(
            ("src/a.py", ChangeKind.NEW),
            "src/b.py",
            "src/c.js",
            "Makefile",
        ))
        assert stats.extensions == {"py": 2, "js": 1}
        assert stats.operations == {Operation.ADD: 1, Operation.UPDATE: 3}

    def test_directories_distinct_in_first_seen_order(self):
        stats = aggregate_stats(changes("b/x.py", "a/y.py", "b/z.py", "top.py"))
        assert stats.directories == ["b", "a"]

    def test_contexts_distinct(self):
        stats = aggregate_stats(changes("tests/a.py", "tests/b.py", "src/main.py"))
        assert stats.contexts == [Context.TEST, Context.FILE]

    def test_does_not_mutate_input(self):
        facts = changes("src/a.py", "tests/b.py")
        snapshot = [FileChange(**vars(fc)) for fc in facts]
        aggregate_stats(facts)
        assert facts == snapshot

    def test_empty(self):
        assert aggregate_stats([]) == ChangeStats()


# ---------------------------------------------------------------------------
# CommitTypeClassifier
# ---------------------------------------------------------------------------

def stats_of(extensions=None, operations=None, contexts=None, directories=None):
    return ChangeStats(
        extensions=extensions or {},
        operations=operations or {},
        contexts=contexts or [],
        directories=directories or [],
    )


class TestClassifyCommitType:

    @pytest.mark.parametrize("stats, expected", [
        pytest.param(stats_of({"md": 1}, contexts=[Context.TEST]), CommitType.TEST, id="test-context"),
        pytest.param(stats_of({"md": 1}), CommitType.DOCS, id="markdown"),
        pytest.param(stats_of({"rst": 1, "css": 1}), CommitType.DOCS, id="docs-before-style"),
        pytest.param(stats_of(contexts=[Context.DOCS]), CommitType.DOCS, id="docs-context"),
        pytest.param(stats_of({"scss": 2}), CommitType.STYLE, id="scss"),
        pytest.param(stats_of(contexts=[Context.STYLE]), CommitType.STYLE, id="style-context"),
        pytest.param(stats_of({"yaml": 1}, {Operation.ADD: 1}), CommitType.CHORE, id="new-yaml-is-chore"),
        pytest.param(stats_of({"gradle": 1}), CommitType.CHORE, id="gradle-extension-is-config"),
        pytest.param(stats_of(contexts=[Context.CONFIG]), CommitType.CHORE, id="config-context"),
        pytest.param(stats_of(contexts=[Context.BUILD]), CommitType.BUILD, id="build-context"),
        pytest.param(stats_of({"maven": 1}), CommitType.BUILD, id="maven-extension"),
        pytest.param(stats_of({"py": 3}, {Operation.ADD: 2, Operation.UPDATE: 1}), CommitType.FEAT, id="more-adds"),
        pytest.param(
            stats_of({"java": 3}, {Operation.ADD: 1, Operation.UPDATE: 1, Operation.REMOVE: 1}),
            CommitType.REFACTOR, id="removal",
        ),
        pytest.param(stats_of({"ts": 2}, {Operation.UPDATE: 2}), CommitType.FIX, id="source-update"),
        pytest.param(stats_of({"go": 1}, {Operation.UPDATE: 1}), CommitType.CHORE, id="fallback"),
    ])
    def test_rules(self, stats, expected):
        assert classify_commit_type(stats) == expected

    def test_equal_adds_and_updates_is_not_feat(self):
        stats = stats_of({"kt": 2}, {Operation.ADD: 1, Operation.UPDATE: 1})
        assert classify_commit_type(stats) == CommitType.FIX

    def test_empty_stats(self):
        assert classify_commit_type(ChangeStats()) == CommitType.CHORE

    def test_cli_type_names_match_enum(self):
        assert sorted(COMMIT_TYPE_NAMES) == sorted(t.value for t in CommitType)


# ---------------------------------------------------------------------------
# ScopeClassifier
# ---------------------------------------------------------------------------

class TestClassifyScope:

    @pytest.mark.parametrize("contexts, expected", [
        ([Context.API, Context.AUTH], "auth"),
        ([Context.UI, Context.API], "api"),
        ([Context.UI, Context.DATABASE], "database"),
        ([Context.FILE, Context.UI], "ui"),
    ])
    def test_context_priority(self, contexts, expected):
        assert classify_scope(stats_of(contexts=contexts)) == expected

    @pytest.mark.parametrize("directory, expected", [
        ("services", "api"),
        ("Views", "ui"),
        ("security", "auth"),
        ("models", "database"),
        ("settings", "config"),
        ("helpers", "utils"),
        ("tests", "test"),
        ("api_views", "api"),
    ])
    def test_directory_keywords(self, directory, expected):
        stats = stats_of(contexts=[Context.FILE], directories=[directory])
        assert classify_scope(stats) == expected

    def test_first_matching_directory_wins(self):
        stats = stats_of(directories=["lib", "helpers", "models"])
        assert classify_scope(stats) == "utils"

    def test_context_beats_directory(self):
        stats = stats_of(contexts=[Context.AUTH], directories=["services"])
        assert classify_scope(stats) == "auth"

    @pytest.mark.parametrize("extensions, expected", [
        ({"java": 1}, "backend"),
        ({"php": 1, "js": 3}, "backend"),
        ({"vue": 1}, "frontend"),
        ({"html": 2}, "frontend"),
        ({"sql": 1}, "database"),
    ])
    def test_extension_fallback(self, extensions, expected):
        assert classify_scope(stats_of(extensions, directories=["lib"])) == expected

    def test_unscoped(self):
        assert classify_scope(stats_of({"go": 1}, directories=["cmd"])) == ""


# ---------------------------------------------------------------------------
# DescriptionGenerator
# ---------------------------------------------------------------------------

class TestFileLabels:

    @pytest.mark.parametrize("path, expected", [
        ("src/Main.java", "Java class"),
        ("web/app.js", "JavaScript module"),
        ("web/index.php", "PHP script"),
        ("pkg/tool.py", "Python module"),
        ("web/site.css", "stylesheet"),
        ("web/page.html", "HTML template"),
        ("pkg/data.json", "JSON config"),
        ("pkg/beans.xml", "XML config"),
        ("CHANGES.md", "documentation"),
        ("app/build.gradle", "build script"),
        ("ci/deploy.yml", "YAML config"),
        ("ci/deploy.YAML", "YAML config"),
        ("Makefile", "Makefile"),
        ("cmd/main.go", "main.go"),
    ])
    def test_file_type_label(self, path, expected):
        assert file_type_label(extract_change(record(path))) == expected

    def test_label_without_name(self):
        assert file_type_label(FileChange()) == "file"

    @pytest.mark.parametrize("path, expected", [
        ("src/main.py", "main.py"),
        ("config/app.json", "app.json (configuration)"),
        ("src/api/routes.py", "routes.py (API layer)"),
        ("src/components/Nav.vue", "Nav.vue (user interface)"),
        ("tests/test_app.py", "test_app.py (test suite)"),
        ("src/db/repo.py", "repo.py (database layer)"),
        ("src/auth/jwt.py", "jwt.py (authentication)"),
        ("settings.gradle", "settings.gradle (build system)"),
        ("web/main.css", "main.css (style)"),
        ("docs/intro.md", "intro.md (docs)"),
    ])
    def test_file_detail(self, path, expected):
        assert file_detail(extract_change(record(path))) == expected

    def test_detail_without_name(self):
        assert file_detail(FileChange()) == "unknown file"


class TestShortDescription:

    def _short(self, *specs):
        facts = changes(*specs)
        return DescriptionGenerator().short(facts, aggregate_stats(facts))

    @pytest.mark.parametrize("spec, expected", [
        (("README.md", ChangeKind.NEW), "add documentation"),
        (("src/auth/Login.java", ChangeKind.MODIFIED), "update Java class authentication"),
        (("config/app.json", ChangeKind.NEW), "add JSON config configuration"),
        (("src/api/Users.java", ChangeKind.MODIFIED), "update Java class API endpoint"),
        (("src/components/Nav.js", ChangeKind.NEW), "add JavaScript module component"),
        (("tests/test_app.py", ChangeKind.DELETED), "remove Python module tests"),
        (("src/db/Schema.java", ChangeKind.MODIFIED), "update Java class schema"),
        (("web/main.css", ChangeKind.MODIFIED), "update style stylesheet"),
        (("docs/intro.md", ChangeKind.MODIFIED), "update docs documentation"),
        (("settings.gradle", ChangeKind.MODIFIED), "update build build script"),
        (("src/Engine.java", ChangeKind.MOVED), "move Java class"),
        (("cmd/main.go", ChangeKind.OTHER), "modify main.go"),
    ])
    def test_single_file(self, spec, expected):
        assert self._short(spec) == expected

    def test_single_file_without_identity(self):
        facts = extract_changes([ChangeRecord(ChangeKind.OTHER)])
        assert DescriptionGenerator().short(facts, aggregate_stats(facts)) == "modify file"

    def test_shared_context_uses_context_name(self):
        result = self._short(
            ("api/users.json", ChangeKind.NEW),
            ("api/UserController.java", ChangeKind.MODIFIED),
        )
        assert result == "add api implementation"

    def test_verb_tie_goes_to_first_operation_seen(self):
        result = self._short(
            ("api/UserController.java", ChangeKind.MODIFIED),
            ("api/users.json", ChangeKind.NEW),
        )
        assert result == "update api implementation"

    def test_majority_operation(self):
        result = self._short(
            ("api/a.py", ChangeKind.NEW),
            ("api/b.py", ChangeKind.MODIFIED),
            ("api/c.py", ChangeKind.MODIFIED),
        )
        assert result == "update api implementation"

    def test_mixed_contexts_use_majority_extension(self):
        result = self._short("src/main.py", "src/db/models.py", "lib/util.js")
        assert result == "update Python modules"

    def test_extension_tie_goes_to_first_seen(self):
        result = self._short("lib/one.java", "auth/two.js")
        assert result == "update Java implementation"

    @pytest.mark.parametrize("paths, expected", [
        (["web/a.js", "web/b.js", "auth/c.py"], "update JavaScript functionality"),
        (["web/a.php", "auth/b.txt"], "update PHP implementation"),
        (["web/a.css", "web/b.css", "auth/c.py"], "update styling system"),
        (["web/a.html", "web/b.html", "auth/c.py"], "update UI templates"),
        (["lib/a.json", "lib/b.xml", "auth/c.xml"], "update configuration files"),
        (["lib/a.md", "lib/b.md", "auth/c.py"], "update documentation"),
        (["cmd/a.go", "auth/b.go"], "update project structure"),
        (["Makefile", "config/Dockerfile"], "update project structure"),
    ])
    def test_extension_phrases(self, paths, expected):
        assert self._short(*paths) == expected


class TestLongDescription:

    def _long(self, *specs):
        return DescriptionGenerator().long(changes(*specs))

    def test_empty_for_single_file(self):
        assert self._long("src/main.py") == ""

    def test_empty_for_no_files(self):
        assert DescriptionGenerator().long([]) == ""

    def test_three_updates_share_one_group(self):
        result = self._long("src/api/routes.py", "src/main.py", "tests/test_main.py")
        assert result == (
            "- Update 3 files:\n"
            "  • routes.py (API layer)\n"
            "  • main.py\n"
            "  • test_main.py (test suite)"
        )

    def test_groups_in_first_seen_order(self):
        result = self._long(
            "src/a.py",
            ("src/new.py", ChangeKind.NEW),
            "src/b.py",
        )
        assert result == (
            "- Update 2 files:\n"
            "  • a.py\n"
            "  • b.py\n"
            "\n"
            "- Add new.py"
        )

    def test_single_file_groups(self):
        result = self._long(
            ("src/old.py", ChangeKind.DELETED),
            ("src/Main.java", ChangeKind.MOVED),
        )
        assert result == "- Remove old.py\n\n- Move Main.java"


# ---------------------------------------------------------------------------
# MessageComposer
# ---------------------------------------------------------------------------

class TestComposeMessage:

    def test_unscoped(self):
        assert compose_message("docs", "", "add documentation") == "docs: add documentation"

    def test_scoped(self):
        assert compose_message("fix", "auth", "update login") == "fix(auth): update login"

    def test_with_body(self):
        result = compose_message("feat", "api", "add endpoints", "- Add a.py\n\n- Update b.py")
        assert result == "feat(api): add endpoints\n\n- Add a.py\n\n- Update b.py"

    def test_build_message_empty(self):
        assert build_message([]) == NO_CHANGES_MESSAGE


class TestGenerateCommitMessage:
    """End-to-end behavior of the public entry point."""

    def test_empty_input(self):
        assert generate_commit_message([]) == "chore: no changes detected"

    def test_readme_added(self):
        message = generate_commit_message([record("README.md", ChangeKind.NEW)])
        assert message == "docs: add documentation"

    def test_auth_java_update(self):
        message = generate_commit_message([record("src/auth/Login.java")])
        assert message == "fix(auth): update Java class authentication"

    def test_shared_api_context(self):
        message = generate_commit_message([
            record("api/users.json", ChangeKind.NEW),
            record("api/UserController.java"),
        ])
        assert message == (
            "chore(api): add api implementation\n"
            "\n"
            "- Add users.json (API layer)\n"
            "\n"
            "- Update UserController.java (API layer)"
        )

    def test_removals_read_as_refactor(self):
        message = generate_commit_message([
            record("src/core/Engine.java", ChangeKind.DELETED),
            record("src/core/Parser.java", ChangeKind.DELETED),
            record("src/core/Lexer.java", ChangeKind.DELETED),
            record("src/core/Token.java"),
            record("src/core/Scanner.java"),
        ])
        assert message.startswith("refactor(backend): remove file implementation\n\n")
        assert "- Remove 3 files:" in message
        assert "- Update 2 files:" in message

    def test_three_updates_body(self):
        message = generate_commit_message([
            record("src/api/routes.py"),
            record("src/db/models.py"),
            record("src/main.py"),
        ])
        body = message.split("\n\n", 1)[1]
        assert body.split("\n") == [
            "- Update 3 files:",
            "  • routes.py (API layer)",
            "  • models.py (database layer)",
            "  • main.py",
        ]

    def test_deterministic(self):
        records = [
            record("web/a.js", ChangeKind.NEW),
            record("web/b.css"),
            record("src/auth/c.py", ChangeKind.DELETED),
            record("docs/d.md", ChangeKind.MOVED),
        ]
        assert generate_commit_message(records) == generate_commit_message(list(records))

    def test_unreadable_record(self):
        assert generate_commit_message([ExplodingRecord()]) == "chore: modify file"

    def test_no_body(self):
        message = generate_commit_message(
            [record("src/a.py"), record("src/b.py")],
            include_body=False,
        )
        assert message == "fix: update file implementation"

    def test_forced_type(self):
        message = generate_commit_message([record("src/auth/Login.java")], forced_type="feat")
        assert message == "feat(auth): update Java class authentication"

    def test_pipeline_failure_returns_fallback(self, monkeypatch):
        def boom(changes):
            raise RuntimeError("unexpected")

        monkeypatch.setattr("smartcommit.message.composer.analyze", boom)
        assert generate_commit_message([record("src/a.py")]) == FALLBACK_MESSAGE

    def test_invalid_forced_type_returns_fallback(self):
        assert generate_commit_message([record("src/a.py")], forced_type="wip") == FALLBACK_MESSAGE

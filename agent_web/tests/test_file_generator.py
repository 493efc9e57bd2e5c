from agent_web.domain.models import GeneratedFile, TechSummary
from agent_web.services.file_generator import ScaffoldFileGenerator, bundle_text, js_string, preamble_for


def _tech(language, framework) -> TechSummary:
    return TechSummary(language=language, framework=framework, tools=(), confidence="low", rationale="")


def test_nextjs_bundle_has_component_and_playbook():
    files = ScaffoldFileGenerator().generate(_tech("TypeScript", "Next.js"), ["Build a dashboard"])

    assert [f.path for f in files] == ["src/components/GeneratedSolution.tsx", "src/lib/agent-playbook.ts"]
    assert [f.language for f in files] == ["tsx", "ts"]

    component, playbook = files
    assert component.content.startswith("/**\n * Generated scaffold by the Coding Agent.\n")
    assert "export function GeneratedSolution({ onComplete }: Props) {" in component.content
    assert 'log: [...prev.log, "Executing: Build a dashboard"],' in component.content

    assert 'id: "strategist",' in playbook.content
    assert '"Maintain exhaustive test coverage for state machines.",' in playbook.content
    assert "] as const;" in playbook.content


def test_nextjs_component_without_highlights_uses_core_feature():
    component = ScaffoldFileGenerator().generate(_tech("TypeScript", "Next.js"), [])[0]
    assert '"Executing: core feature"' in component.content


def test_highlight_is_escaped_inside_string_literal():
    component = ScaffoldFileGenerator().generate(_tech("TypeScript", "Next.js"), ['say "hi"'])[0]
    assert r'"Executing: say \"hi\""' in component.content


def test_highlight_keeps_apostrophes_and_ampersands_readable():
    component = ScaffoldFileGenerator().generate(
        _tech("TypeScript", "Next.js"), ["Show the user's orders & invoices <fast>"]
    )[0]

    assert '      log: [...prev.log, "Executing: Show the user\'s orders & invoices <fast>"],' in component.content
    assert "\\u00" not in component.content


def test_js_string_escapes_only_what_a_literal_needs():
    assert js_string('a "b" & c\'s\nd') == '"a \\"b\\" & c\'s\\nd"'
    assert js_string("café") == '"café"'


def test_python_bundle_is_fastapi_app():
    files = ScaffoldFileGenerator().generate(_tech("Python", "FastAPI"), ["x"])

    assert len(files) == 1
    main = files[0]
    assert main.path == "agent/main.py"
    assert main.language == "python"
    assert main.content.startswith('"""\nGenerated scaffold by the Coding Agent.')
    assert '@app.get("/healthz")' in main.content
    assert main.content.endswith('    return {"status": "ok"}\n')


def test_other_stacks_get_notes():
    files = ScaffoldFileGenerator().generate(_tech("Go", "Gin"), ["x"])

    assert [f.path for f in files] == ["AGENT_NOTES.md"]
    assert files[0].language == "md"
    assert files[0].content.startswith("<!--")
    assert "## Open Items" in files[0].content


def test_framework_check_wins_over_language():
    # only the framework decides the Next.js bundle
    files = ScaffoldFileGenerator().generate(_tech("Python", "Next.js"), ["x"])
    assert files[0].path == "src/components/GeneratedSolution.tsx"


def test_preamble_styles():
    assert preamble_for("ts").startswith("/**")
    assert preamble_for("python").startswith('"""')
    assert preamble_for("md").startswith("<!--")


def test_bundle_text_joins_files():
    files = [
        GeneratedFile(path="a.txt", description="", language="md", content="A"),
        GeneratedFile(path="b/c.txt", description="", language="md", content="C\n"),
    ]
    assert bundle_text(files) == "// a.txt\nA\n\n// b/c.txt\nC\n"


def test_bundle_text_empty():
    assert bundle_text([]) == ""

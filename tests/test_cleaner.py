import pytest

from termclip.reflow import Classification, classify, clean, is_already_clean


WRAPPED_SCP = (
    "  scp -o IdentitiesOnly=yes -i ~/.ssh/id_ed25519 ~/.claude/settings.json\n"
    "  jongrant@jons-mac-mini-2.local:~/.claude/"
)
DOCKER_CONTINUED = "docker run \\\n  -v /host:/container \\\n  -p 8080:80 \\\n  nginx"
GIT_SEQUENCE = '  git add .\n  git commit -m "fix"\n  git push\n'
MARKDOWN = "  ## Section Title\n\n  Some body text here.\n  - bullet one\n  - bullet two\n"
FENCED = '  ```bash\n  echo "hello"\n  echo "world"\n  ```\n'
CODE = '  def hello():\n      print("world")\n      if True:\n          return 1\n'
TWO_PARAGRAPHS = (
    "  First paragraph that wraps\n  across two lines.\n\n"
    "  Second paragraph also\n  wrapping here.\n"
)
CURL = (
    "  curl -X POST https://api.example.com/v1/deploy\n"
    '  -H "Authorization: Bearer token123"\n'
    "  -d '{\"app\": \"termclip\"}'\n"
)

SAMPLES = [
    "",
    "   \n  \n   ",
    "  scp foo bar  ",
    WRAPPED_SCP,
    DOCKER_CONTINUED,
    GIT_SEQUENCE,
    MARKDOWN,
    FENCED,
    CODE,
    TWO_PARAGRAPHS,
    CURL,
    "line one\r\nline two\r\n",
    "a \\\n\\\nb",
    "| a | b |\n| 1 | 2 |",
    "tail continues \\",
]


def test_single_line_is_trimmed():
    assert clean("  scp foo bar  ") == "scp foo bar"
    assert clean("git push origin main") == "git push origin main"


def test_empty_and_whitespace_only():
    assert clean("") == ""
    assert clean("   \n  \n   ") == ""
    assert classify("\t\n") is Classification.EMPTY


def test_wrapped_command_joins_to_one_line():
    assert clean(WRAPPED_SCP) == (
        "scp -o IdentitiesOnly=yes -i ~/.ssh/id_ed25519 ~/.claude/settings.json "
        "jongrant@jons-mac-mini-2.local:~/.claude/"
    )
    assert classify(WRAPPED_SCP) is Classification.SINGLE_BLOCK_PROSE


def test_wrapped_curl_with_flag_lines():
    assert clean(CURL) == (
        "curl -X POST https://api.example.com/v1/deploy "
        '-H "Authorization: Bearer token123" '
        "-d '{\"app\": \"termclip\"}'"
    )


def test_backslash_continuation_joins():
    out = clean(DOCKER_CONTINUED)
    assert out == "docker run -v /host:/container -p 8080:80 nginx"
    assert "\\" not in out
    assert classify(DOCKER_CONTINUED) is Classification.BACKSLASH_CONTINUED


def test_continuation_collapses_spaces():
    assert clean("ls  -la \\\n   /tmp") == "ls -la /tmp"


def test_separate_commands_kept_on_separate_lines():
    assert clean(GIT_SEQUENCE) == 'git add .\ngit commit -m "fix"\ngit push'
    assert classify(GIT_SEQUENCE) is Classification.COMMAND_SEQUENCE


def test_mixed_commands_and_arguments_join_as_prose():
    assert clean("git commit -m\n'a message'") == "git commit -m 'a message'"


def test_markdown_structure_preserved():
    out = clean(MARKDOWN)
    assert out == "## Section Title\n\nSome body text here.\n- bullet one\n- bullet two"
    assert classify(MARKDOWN) is Classification.MARKDOWN


def test_fenced_code_block_preserved():
    out = clean(FENCED)
    assert out == '```bash\necho "hello"\necho "world"\n```'


def test_single_fence_line_is_fenced_code():
    text = "```\nsome\ntext"
    assert classify(text) is Classification.FENCED_CODE
    assert clean(text) == text


def test_code_with_varying_indent_preserved():
    out = clean(CODE)
    assert out == 'def hello():\n    print("world")\n    if True:\n        return 1'
    assert classify(CODE) is Classification.VARIABLE_INDENT_CODE


def test_single_space_drift_still_joins():
    assert clean("hello there\n world") == "hello there world"


def test_blank_lines_separate_paragraphs():
    out = clean(TWO_PARAGRAPHS)
    assert out == "First paragraph that wraps across two lines.\n\nSecond paragraph also wrapping here."
    assert classify(TWO_PARAGRAPHS) is Classification.MULTI_PARAGRAPH_PROSE


def test_paragraphs_cleaned_independently():
    text = "git status\ngit diff\n\nsome wrapped\nprose here"
    assert clean(text) == "git status\ngit diff\n\nsome wrapped prose here"


def test_many_blank_lines_collapse_to_one_separator():
    assert clean("one\ntwo\n\n\n\nthree\nfour") == "one two\n\nthree four"


def test_crlf_line_endings():
    assert clean("line one\r\nline two\r\n") == "line one line two"


def test_lone_backslash_line_joins():
    assert clean("a \\\n\\\nb") == "a b"


def test_dangling_continuation_on_last_line_is_kept():
    assert clean("echo one \\\necho two \\") == "echo one echo two \\"


def test_is_already_clean():
    assert is_already_clean("already clean")
    assert not is_already_clean("  padded")
    assert not is_already_clean(WRAPPED_SCP)


@pytest.mark.parametrize("text", SAMPLES)
def test_output_is_trimmed(text):
    out = clean(text)
    assert out == out.strip()


@pytest.mark.parametrize("text", SAMPLES)
def test_clean_is_idempotent(text):
    once = clean(text)
    assert clean(once) == once


def test_large_input_completes():
    text = "\n".join(f"word{i} more words here" for i in range(5000))
    out = clean(text)
    assert "\n" not in out
    assert out.startswith("word0 more words here word1")


def test_form_feed_and_separators_are_not_newlines():
    assert clean("page one\x0cpage two") == "page one\x0cpage two"
    assert clean("  a\x0bb\x1cc\x85d  ") == "a\x0bb\x1cc\x85d"
    assert classify("page one\x0cpage two") is Classification.SINGLE_LINE

"""fish installer script 로더"""

from __future__ import annotations
from pathlib    import Path
from typing     import Optional

TEMPLATE = Path(__file__).with_name("git_expand.fish.template")


def load_template() -> str:
    """
    Load Installer Template
    """
    text = TEMPLATE.read_text(encoding="utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def render_installer(executable: Optional[str], no_space: bool = False) -> str:
    """템플릿 치환.
    - executable이 None이면 ${GIT_SHORTHAND}를 그대로 둔다(generic installer)
    - no_space=True 이면 `g<expr>` 형태, 아니면 `git <expr>` 형태로 확장
    """
    text = load_template()
    text = text.replace("${TRIGGER}", "g" if no_space else "git")
    if executable is not None:
        text = text.replace("${GIT_SHORTHAND}", executable)
    return text

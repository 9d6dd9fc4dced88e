# gitshort/gsh.py
"""gsh – git shorthand CLI

사용 예)
    $ gsh expand cam              # -> commit --amend
    $ gsh expand afv -D           # 디버그 출력과 함께 확장
    $ gsh grammar --check         # 문법 트리 출력 + 모호성 검사
    $ gsh installer > ~/.config/fish/conf.d/git_shorthand.fish

기능
----
- expand    : 축약 표현을 git 하위 명령으로 확장
- grammar   : 축약 문법 트리를 출력(옵션: 모호성 검사)
- installer : fish 설치 스크립트 출력

디버그 모드(-D/--debug)를 켜면 확장 과정 요약을 stderr로 출력합니다.
"""

from __future__ import annotations
import argparse
import shutil
import sys
from typing import Optional

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _own_executable() -> str:
    """설치 스크립트에 넣을 실행 명령.
    - PATH에 gsh 콘솔 스크립트가 있으면 그 경로
    - 없으면(예: python -m 실행) 현재 인터프리터로 모듈 실행
    """
    found = shutil.which("gsh")
    if found:
        return found
    return f"{sys.executable} -m gitshort.gsh"

# ------------------------------
# 커맨드 구현
# ------------------------------

def cmd_expand(args) -> int:
    from .grammar import root
    from .tree import Expander
    from .vcs import is_real_command

    expr = args.expr
    eol = not args.no_eol
    if args.debug: _eprint(f"[DEBUG] expr={expr!r} eol={eol}")

    if not args.force:
        if is_real_command(expr):
            _eprint(f"[ERROR] '{expr}' is a real git command")
            return 2
        if args.debug: _eprint("[DEBUG] not a real git command")

    result = Expander(root()).run(expr, eol)
    if result is None:
        _eprint(f"[NO MATCH] '{expr}'")
        return 1

    if args.debug: _eprint(f"[DEBUG] expansion={result!r}")
    print(result.strip())
    return 0


def cmd_grammar(args) -> int:
    from .grammar import root
    from .tree import Limits, find_ambiguities, render

    g = root()
    print(render(g))
    if not args.check:
        return 0

    limits = Limits(max_picks=args.max_picks)
    found = find_ambiguities(g, eol=True, limits=limits)
    if args.debug: _eprint(f"[DEBUG] max_picks={limits.max_picks} ambiguities={len(found)}")
    if not found:
        print("[CHECK OK] no ambiguities")
        return 0

    _eprint(f"[AMBIGUOUS] {len(found)} shorthand(s)")
    for amb in found:
        _eprint(f"  {amb.shorthand!r} -> {amb.produced!r}")
        for reading in amb.readings:
            _eprint(f"      {reading!r}")
    return 1


def cmd_installer(args) -> int:
    from .installer.loader import render_installer

    try:
        executable = None if args.generic else _own_executable()
        text = render_installer(executable, no_space=args.no_space)
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2
    print(text, end="")
    return 0

# ------------------------------
# 엔트리포인트
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="gsh", description="git shorthand expander")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_expand = sub.add_parser("expand", help="축약 표현을 git 하위 명령으로 확장합니다")
    p_expand.add_argument("expr", help="축약 표현 (예: cam)")
    p_expand.add_argument("-f", "--force", action="store_true",
                          help="실제 git 명령과 같은 이름이어도 확장")
    p_expand.add_argument("--no-eol", action="store_true",
                          help="줄 끝이 아님(뒤에 입력이 이어짐)")
    p_expand.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_expand.set_defaults(func=cmd_expand)

    p_grammar = sub.add_parser("grammar", help="축약 문법을 출력합니다")
    p_grammar.add_argument("--check", action="store_true", help="모호한 축약 표현을 찾습니다")
    p_grammar.add_argument("--max-picks", type=int, default=2,
                           help="(--check) 플래그 집합에서 한 번에 고르는 최대 개수")
    p_grammar.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_grammar.set_defaults(func=cmd_grammar)

    p_inst = sub.add_parser("installer", help="fish 설치 스크립트를 출력합니다")
    p_inst.add_argument("--no-space", action="store_true", help="`g<expr>` 형태로 확장")
    p_inst.add_argument("--generic", action="store_true",
                        help="실행 파일 경로를 치환하지 않은 템플릿 출력")
    p_inst.set_defaults(func=cmd_installer)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())

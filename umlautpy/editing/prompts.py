"""Deterministic and terminal implementations of the host prompts."""

from collections.abc import Iterable, Sequence

from umlautpy.editing.host import ConfirmDecision, SubstitutionMatch

_CONFIRM_ANSWERS = {
    "y": ConfirmDecision.ACCEPT,
    "yes": ConfirmDecision.ACCEPT,
    "n": ConfirmDecision.REJECT,
    "no": ConfirmDecision.REJECT,
    "q": ConfirmDecision.ABORT,
    "quit": ConfirmDecision.ABORT,
}


class ScriptedChooser:
    """Answers profile prompts from a fixed list of names."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def choose(self, prompt: str, names: Sequence[str], default: str | None = None) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            if default is None:
                raise LookupError(f"No scripted answer for prompt '{prompt}'")
            return default
        return self._answers.pop(0)


class ScriptedConfirm:
    """Answers confirmation prompts from a fixed list; accepts once exhausted."""

    def __init__(self, decisions: Iterable[ConfirmDecision]) -> None:
        self._decisions = list(decisions)
        self.seen: list[SubstitutionMatch] = []

    def __call__(self, match: SubstitutionMatch) -> ConfirmDecision:
        self.seen.append(match)
        if not self._decisions:
            return ConfirmDecision.ACCEPT
        return self._decisions.pop(0)


class PromptChooser:
    """Asks for a profile name on the terminal."""

    def choose(self, prompt: str, names: Sequence[str], default: str | None = None) -> str:
        suffix = f" [{default}]" if default else ""
        while True:
            answer = input(f"{prompt} ({', '.join(names)}){suffix}: ").strip()
            if not answer and default:
                return default
            if answer in names:
                return answer


class PromptConfirm:
    """Asks y/n/q for every match on the terminal.

    ``aborted`` stays set after a quit answer so callers working through
    several buffers can stop as well.
    """

    def __init__(self, label: str = "") -> None:
        self.label = label
        self.aborted = False

    def __call__(self, match: SubstitutionMatch) -> ConfirmDecision:
        where = f"{self.label}:" if self.label else ""
        while True:
            answer = input(
                f"{where}{match.span.start}: replace {match.found!r} with {match.replacement!r}? (y/n/q) "
            )
            decision = _CONFIRM_ANSWERS.get(answer.strip().lower())
            if decision is not None:
                if decision is ConfirmDecision.ABORT:
                    self.aborted = True
                return decision

# app_CLI.py
import config
from controller import StudySession
from odds_math import round_to_precision

HELP_TXT = (
    "Commands:\n"
    "  P <p>               — probability → odds → log-odds, with an example\n"
    "  COMPARE <p>         — probability vs odds\n"
    "  SIM <p> [n]         — run n Bernoulli trials (default 100)\n"
    "  GEN [n]             — generate n practice questions (default 5)\n"
    "  SHOW                — list the current questions\n"
    "  ANSWER <i> <text>   — answer question i (1-based)\n"
    "  CHECK               — grade your answers\n"
    "  KEY                 — show the answer key\n"
    "  HELP                — show commands\n"
    "  QUIT                — exit\n"
)


# ---------------------------
# Output helpers
# ---------------------------
def send_message(text: str):
    print(text)


def receive_message(prompt: str = "> ") -> str:
    try:
        return input(prompt)
    except EOFError:
        return "QUIT"


def _fmt(v) -> str:
    if isinstance(v, str):
        return v
    return f"{v:.3f}"


def show_questions(st: StudySession):
    if not len(st.question_set):
        send_message("No questions yet. Type GEN to make some.")
        return
    for i, q in enumerate(st.question_set, start=1):
        hint = " (True/False)" if q.input_mode == "boolean" else ""
        given = st.answers.get(i - 1)
        tail = f"   [your answer: {given}]" if given else ""
        send_message(f"{i}. {q.prompt}{hint}{tail}")


def show_key(st: StudySession):
    send_message("Answer Key")
    for row in st.question_set.answer_key():
        send_message(f"Question {row['number']}: {row['question']}\n"
                     f"  Answer: {row['answer']}\n"
                     f"  Explanation: {row['explanation']}")


# ---------------------------
# Commands
# ---------------------------
def handle_command(st: StudySession, raw: str) -> bool:
    """Run one command line. Returns False when the loop should stop."""
    raw = (raw or "").strip()
    if not raw:
        return True
    parts = raw.split(maxsplit=1)
    cmd = parts[0].upper()
    arg = parts[1] if len(parts) > 1 else ""

    if cmd == "QUIT":
        return False
    elif cmd == "HELP":
        send_message(HELP_TXT)
    elif cmd == "P":
        v = st.logit_view(arg or "0.5")
        send_message(f"p = {_fmt(v['probability'])} | odds = {_fmt(v['odds'])} | "
                     f"log-odds = {_fmt(v['log_odds'])}")
        send_message(v["example"])
    elif cmd == "COMPARE":
        v = st.comparison_view(arg or "0.5")
        send_message(f"p = {_fmt(v['probability'])} | odds = {_fmt(v['odds'])}")
    elif cmd == "SIM":
        args = arg.split()
        raw_p = args[0] if args else "0.5"
        raw_n = args[1] if len(args) > 1 else config.DEFAULT_TRIALS
        res = st.simulate(raw_p, raw_n)
        send_message(f"p = {_fmt(round_to_precision(res.probability))} over {res.trial_count} trials: "
                     f"{res.success_count} successes, {res.failure_count} failures "
                     f"(rate {_fmt(round_to_precision(res.observed_rate))})")
    elif cmd == "GEN":
        st.new_questions(arg or None)
        show_questions(st)
    elif cmd == "SHOW":
        show_questions(st)
    elif cmd == "ANSWER":
        num, _, text = arg.partition(" ")
        if not num.isdigit() or not st.record_answer(int(num) - 1, text.strip()):
            send_message("Usage: ANSWER <question number> <your answer>")
    elif cmd == "CHECK":
        if not len(st.question_set):
            send_message("No questions yet. Type GEN to make some.")
            return True
        result = st.check()
        for fb in result.feedback:
            send_message(f"{fb.index + 1}. {fb.message}")
        send_message(result.score_text)
    elif cmd == "KEY":
        show_key(st)
    else:
        send_message("Unknown command. Type HELP.")
    return True


# ---------------------------
# Main loop
# ---------------------------
def main():
    config.configure_logging()
    print("Odds & Log-Odds Trainer — type HELP for commands.")
    st = StudySession()
    st.new_questions()
    print(HELP_TXT)

    while handle_command(st, receive_message("cmd> ")):
        pass


if __name__ == "__main__":
    main()

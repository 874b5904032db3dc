# server.py: Flask JSON app for the odds / log-odds visualizer
import logging
from typing import Optional

from flask import Flask, current_app, request, jsonify
from flask_cors import CORS

import config
from controller import StudySession
from odds_math import comparison_curve, logit_curve

logger = logging.getLogger(__name__)


# -----------------------------
# Helpers
# -----------------------------
def _body() -> dict:
    data = request.get_json(force=True, silent=True)
    return data if isinstance(data, dict) else {}


def _session() -> StudySession:
    return current_app.extensions["study_session"]


def _parse_answers(raw):
    """{"0": "0.405", "1": "True"} -> {0: "0.405", 1: "True"}; None when malformed."""
    if raw is None:
        return {}
    if isinstance(raw, list):
        return {i: ("" if v is None else str(v)) for i, v in enumerate(raw)}
    if not isinstance(raw, dict):
        return None
    out = {}
    for k, v in raw.items():
        try:
            idx = int(k)
        except (TypeError, ValueError):
            return None
        out[idx] = "" if v is None else str(v)
    return out


# -----------------------------
# App
# -----------------------------
def create_app(session: Optional[StudySession] = None) -> Flask:
    app = Flask(__name__)
    CORS(app)
    app.extensions["study_session"] = session or StudySession()

    @app.get("/")
    def index():
        return jsonify({
            "app": "odds-visualizer",
            "routes": ["/health", "/convert", "/compare", "/curves", "/simulate",
                       "/questions", "/answer-key", "/grade"],
        })

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    # -- read-outs for the two top charts --
    @app.get("/convert")
    def convert():
        return jsonify(_session().logit_view(request.args.get("p", "0.5")))

    @app.get("/compare")
    def compare():
        return jsonify(_session().comparison_view(request.args.get("p", "0.5")))

    @app.get("/curves")
    def curves():
        return jsonify({
            "logit": [{"x": p, "y": y} for p, y in logit_curve()],
            "comparison": [
                {"label": label, "probability": p, "odds": odds}
                for label, p, odds in comparison_curve(odds_cap=config.ODDS_CHART_CAP)
            ],
        })

    # -- simulation --
    @app.post("/simulate")
    def simulate():
        data = _body()
        result = _session().simulate(data.get("p"), data.get("n"))
        return jsonify(result.to_dict())

    # -- practice questions --
    @app.post("/questions")
    def new_questions():
        data = _body()
        qs = _session().new_questions(data.get("count"))
        return jsonify(qs.to_dict())

    @app.get("/questions")
    def current_questions():
        return jsonify(_session().question_set.to_dict())

    @app.get("/answer-key")
    def answer_key():
        return jsonify({"answers": _session().question_set.answer_key()})

    @app.post("/grade")
    def grade_answers():
        answers = _parse_answers(_body().get("answers"))
        if answers is None:
            return jsonify({"error": "answers must map question index to text"}), 400
        return jsonify(_session().check(answers).to_dict())

    return app


app = create_app()


# -----------------------------
# Entrypoint
# -----------------------------
def main():
    config.configure_logging()
    st = app.extensions["study_session"]
    st.new_questions()
    logger.info("serving on %s:%s", config.HOST, config.PORT)
    app.run(host=config.HOST, port=config.PORT, debug=False, threaded=False)


if __name__ == "__main__":
    main()

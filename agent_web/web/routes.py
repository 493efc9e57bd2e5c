## routes.py
from __future__ import annotations

import io
from pathlib import PurePosixPath

from flask import Blueprint, abort, current_app, jsonify, render_template, request, send_file

from agent_web.domain.errors import AgentInputError
from agent_web.domain.models import AgentResult
from agent_web.domain.playbook import AGENT_ROLES, EXAMPLE_BRIEFS
from agent_web.services.file_generator import bundle_text
from agent_web.services.stage_generator import reveal_schedule

BUNDLE_FILENAME = "bundle.txt"


def _link_for(run_id: str, path: str) -> str:
    return f"/download/{run_id}/{path}"


def _schedule_payload(result: AgentResult) -> dict:
    offsets, complete_at = reveal_schedule(result.stages)
    return {
        "stages": [{"id": stage_id, "startMs": start} for stage_id, start in offsets],
        "completeMs": complete_at,
    }


def _send_text(text: str, filename: str):
    return send_file(
        io.BytesIO(text.encode("utf-8")),
        mimetype="text/plain",
        as_attachment=True,
        download_name=filename,
    )


def create_blueprint(agent_service) -> Blueprint:
    bp = Blueprint("web", __name__)
    run_repo = agent_service.run_repo

    def render_index(prompt: str, error: str | None = None, code: int = 200):
        return render_template(
            "index.html",
            prompt=prompt,
            example_briefs=EXAMPLE_BRIEFS,
            error=error,
        ), code

    @bp.get("/")
    def index():
        prompt = (request.args.get("brief") or "").strip() or EXAMPLE_BRIEFS[0]
        return render_index(prompt)

    @bp.post("/run")
    def run_agent():
        raw_prompt = request.form.get("prompt") or ""

        try:
            result = agent_service.run(raw_prompt)
        except AgentInputError as e:
            current_app.logger.warning("Rejected brief: %s", e)
            return render_index(raw_prompt, error=str(e), code=400)

        downloads = {f.path: _link_for(result.run_id, f.path) for f in result.files}

        return render_template(
            "result.html",
            result=result,
            roles=AGENT_ROLES,
            downloads=downloads,
            bundle_link=_link_for(result.run_id, BUNDLE_FILENAME),
            bundle=bundle_text(result.files),
            schedule=_schedule_payload(result),
        )

    @bp.post("/api/run")
    def api_run():
        payload = request.get_json(silent=True)
        if payload is None:
            payload = request.form.to_dict()

        raw_prompt = payload.get("prompt", "") if isinstance(payload, dict) else None
        if not isinstance(raw_prompt, str):
            return jsonify(error="Field 'prompt' must be a string."), 400

        try:
            result = agent_service.run(raw_prompt)
        except AgentInputError as e:
            current_app.logger.warning("Rejected brief: %s", e)
            return jsonify(error=str(e)), 400

        body = result.to_dict()
        body["schedule"] = _schedule_payload(result)
        body["bundle"] = bundle_text(result.files)
        return jsonify(body)

    @bp.get(f"/download/<run_id>/{BUNDLE_FILENAME}")
    def download_bundle(run_id: str):
        result = run_repo.get(run_id)
        if result is None:
            abort(404)
        return _send_text(bundle_text(result.files), f"agent-{run_id}.txt")

    @bp.get("/download/<run_id>/<path:filename>")
    def download(run_id: str, filename: str):
        result = run_repo.get(run_id)
        if result is None:
            abort(404)

        generated = result.find_file(filename)
        if generated is None:
            abort(404)

        return _send_text(generated.content, PurePosixPath(generated.path).name)

    return bp

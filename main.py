from flask import Flask, render_template_string, request, jsonify, abort
from werkzeug.exceptions import HTTPException
import os
import threading
import webbrowser

from strongpass import analyze_password, generate_password

app = Flask(__name__)

# --- Configuration (override with STRONGPASS_HOST, STRONGPASS_PORT, ...) ---
app.config.from_mapping(
    HOST="127.0.0.1",
    PORT=8080,
    DEBUG=True,
    OPEN_BROWSER=True,
)
app.config.from_prefixed_env("STRONGPASS")

def open_browser():
    webbrowser.open(f"http://{app.config['HOST']}:{app.config['PORT']}/")

# --- HTML Template ---

CHECK_LABELS = [
    ("length", "At least 12 characters"),
    ("uppercase", "Uppercase letters (A-Z)"),
    ("lowercase", "Lowercase letters (a-z)"),
    ("numbers", "Numbers (0-9)"),
    ("symbols", "Special characters (!@#$...)"),
    ("commonWords", "No common words"),
    ("repeatedChars", "No repeated characters"),
    ("sequential", "No sequential characters"),
]

HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <title>Strong Password Tester</title>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width,initial-scale=1">
    <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css" rel="stylesheet">
    <style>
        .strength-bar { height: 10px; border-radius: 5px; transition: width .3s; }
        .bucket-very-strong { background: #16a34a; }
        .bucket-strong { background: #4ade80; }
        .bucket-good { background: #3b82f6; }
        .bucket-fair { background: #eab308; }
        .bucket-weak { background: #f97316; }
        .bucket-very-weak { background: #ef4444; }
        .pw-box { font-family: monospace; font-size: 1.2em; }
    </style>
</head>
<body class="bg-dark text-light">
<div class="container py-4" style="max-width: 820px">
    <h1 class="mb-3">🔐 Strong Password Tester</h1>
    <p class="text-secondary">Test your password strength and get real-time feedback.</p>
    <div class="input-group mb-3">
        <input id="password" type="password" class="form-control pw-box"
               placeholder="Type or paste your password here..." autocomplete="off">
        <button class="btn btn-outline-secondary" type="button" id="toggle">Show</button>
        <button class="btn btn-outline-info" type="button" id="copy">Copy</button>
        <button class="btn btn-primary" type="button" id="generate">Generate</button>
    </div>
    <div id="result" style="display:none;">
        <div class="d-flex justify-content-between">
            <b>Password strength</b><span id="strength"></span>
        </div>
        <div class="bg-secondary rounded mb-3">
            <div class="strength-bar" id="bar"></div>
        </div>
        <div class="mb-3" id="stats">
            <b>Entropy:</b> <span id="entropy"></span> bits,
            <b>Security:</b> <span id="secure"></span>% secure,
            <b>Length:</b> <span id="length"></span> characters,
            <b>Checks passed:</b> <span id="passed"></span>/8
        </div>
        <ul class="list-unstyled mb-3" id="checks">
        {% for key, label in checks %}
            <li data-check="{{ key }}"><span class="mark"></span> {{ label }}</li>
        {% endfor %}
        </ul>
        <div class="mb-3"><b>Recommendations</b><ul id="feedback"></ul></div>
        <div class="mb-3" id="words-box"><b>Dictionary words found:</b> <span id="words"></span></div>
    </div>
    <footer class="mt-5 text-center">
        <small>All password checking is done locally. Passwords are never stored.</small>
    </footer>
</div>
<script>
const input = document.getElementById("password");

function bucket(score) {
    if (score >= 90) return "bucket-very-strong";
    if (score >= 75) return "bucket-strong";
    if (score >= 60) return "bucket-good";
    if (score >= 40) return "bucket-fair";
    if (score >= 20) return "bucket-weak";
    return "bucket-very-weak";
}

function render(result) {
    let bar = document.getElementById("bar");
    bar.className = "strength-bar " + bucket(result.score);
    bar.style.width = result.score + "%";
    document.getElementById("strength").textContent = result.strength;
    document.getElementById("entropy").textContent = result.entropy.toFixed(1);
    document.getElementById("secure").textContent = Math.round(result.score);
    document.getElementById("length").textContent = input.value.length;
    document.getElementById("passed").textContent = Object.values(result.checks).filter(Boolean).length;
    document.querySelectorAll("#checks li").forEach(li => {
        let ok = result.checks[li.dataset.check];
        li.className = ok ? "text-success" : "text-danger";
        li.querySelector(".mark").textContent = ok ? "✔" : "✘";
    });
    let fb = document.getElementById("feedback");
    fb.innerHTML = "";
    result.feedback.forEach(msg => {
        let li = document.createElement("li");
        li.textContent = msg;
        fb.appendChild(li);
    });
    document.getElementById("words-box").style.display = result.dictionaryWords.length ? "block" : "none";
    document.getElementById("words").textContent = result.dictionaryWords.join(", ");
    document.getElementById("result").style.display = "block";
}

async function analyze() {
    if (!input.value) {
        document.getElementById("result").style.display = "none";
        return;
    }
    let res = await fetch("/api/analyze", {
        method: "POST",
        headers: {"Content-Type":"application/json"},
        body: JSON.stringify({password: input.value})
    });
    render(await res.json());
}

input.addEventListener("input", analyze);

document.getElementById("toggle").onclick = function() {
    let hidden = input.type == "password";
    input.type = hidden ? "text" : "password";
    this.textContent = hidden ? "Hide" : "Show";
};

document.getElementById("copy").onclick = async function() {
    if (!input.value) return;
    try {
        await navigator.clipboard.writeText(input.value);
        this.textContent = "Copied";
        setTimeout(() => this.textContent = "Copy", 2000);
    } catch (err) {
        console.error("Failed to copy password", err);
    }
};

document.getElementById("generate").onclick = async function() {
    let res = await fetch("/api/generate", {method: "POST"});
    let result = await res.json();
    input.value = result.password;
    render(result.analysis);
};
</script>
</body>
</html>
"""

# --- Error handling ---

@app.errorhandler(HTTPException)
def api_error(e):
    return jsonify({"error": e.description}), e.code

# --- API routes ---

@app.route("/api/analyze", methods=["POST"])
def api_analyze():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description="expected a JSON object")
    password = data.get("password")
    if not isinstance(password, str):
        abort(400, description="'password' must be a string")
    analysis = analyze_password(password)
    app.logger.debug("analyze: length=%d strength=%s", len(password), analysis.strength.value)
    return jsonify(analysis.to_dict())

@app.route("/api/generate", methods=["POST"])
def api_generate():
    password = generate_password()
    analysis = analyze_password(password)
    app.logger.debug("generate: strength=%s", analysis.strength.value)
    return jsonify({
        "password": password,
        "analysis": analysis.to_dict(),
    })

# --- Main route ---

@app.route("/", methods=["GET"])
def home():
    return render_template_string(HTML, checks=CHECK_LABELS)

def main():
    if app.config["OPEN_BROWSER"] and not os.environ.get("WERKZEUG_RUN_MAIN"):
        threading.Timer(1, open_browser).start()
    app.logger.info("serving on http://%s:%s/", app.config["HOST"], app.config["PORT"])
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])

if __name__ == "__main__":
    main()

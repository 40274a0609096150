"""Custom CSS styling for the Learning Path Copilot Gradio UI"""

custom_css = """
/* ============================================
   MARI THEME
   Light by default; Gradio's .dark class switches palettes
   ============================================ */

/* ROOT VARIABLES */
:root {
    --bg-primary: #f8f9fc;
    --bg-secondary: #ffffff;
    --bg-tertiary: #f3f4f6;
    --border-color: #e5e7eb;
    --text-primary: #111827;
    --text-secondary: #6b7280;
    --text-muted: #9ca3af;
    --accent-blue: #2563eb;
    --accent-blue-hover: #1d4ed8;
    --accent-red: #ef4444;
    --accent-green: #10b981;
    --radius-sm: 8px;
    --radius-md: 16px;
    --radius-lg: 32px;
}

.dark {
    --bg-primary: #000000;
    --bg-secondary: #111827;
    --bg-tertiary: #0a0a0a;
    --border-color: #1f2937;
    --text-primary: #f5f5f5;
    --text-secondary: #a0a0a0;
    --text-muted: #666666;
    --accent-blue: #3b82f6;
    --accent-blue-hover: #60a5fa;
}

.gradio-container {
    max-width: 1200px !important;
    width: 100% !important;
    margin: 0 auto !important;
    font-family: -apple-system, BlinkMacSystemFont, 'SF Pro Display', 'Segoe UI', sans-serif !important;
    background: var(--bg-primary) !important;
    color: var(--text-primary) !important;
}

footer { visibility: hidden !important; }

/* HEADER */
#app-header h1 { font-weight: 900 !important; letter-spacing: -0.04em !important; margin-bottom: 0 !important; }
#app-header p { color: var(--text-secondary) !important; text-transform: uppercase !important; font-size: 11px !important; letter-spacing: 0.15em !important; }

/* FORM */
#path-form {
    background: var(--bg-secondary) !important;
    border: 1px solid var(--border-color) !important;
    border-radius: var(--radius-lg) !important;
    padding: 24px !important;
}

textarea, input[type="text"] {
    background: var(--bg-tertiary) !important;
    border: 1px solid var(--border-color) !important;
    border-radius: var(--radius-md) !important;
    color: var(--text-primary) !important;
}

textarea:focus, input:focus {
    border-color: var(--accent-blue) !important;
    box-shadow: 0 0 0 3px rgba(59, 130, 246, 0.15) !important;
}

/* BUTTONS */
button { border-radius: var(--radius-lg) !important; font-weight: 700 !important; }
.primary { background: var(--accent-blue) !important; color: white !important; }
.primary:hover { background: var(--accent-blue-hover) !important; }
.primary:disabled { opacity: 0.5 !important; }

/* ERROR BANNER */
#path-error { color: var(--accent-red) !important; text-align: center !important; }
#path-error strong { color: var(--accent-red) !important; }

/* RESULTS */
#path-results {
    background: var(--bg-secondary) !important;
    border: 1px solid var(--border-color) !important;
    border-radius: var(--radius-lg) !important;
    padding: 24px !important;
}

#path-results h2 { font-weight: 900 !important; letter-spacing: -0.03em !important; }
#path-results h4 { margin-top: 16px !important; }
#path-results code { background: var(--bg-tertiary) !important; color: var(--accent-blue) !important; border-radius: 999px !important; padding: 2px 8px !important; }
#path-results a { color: var(--accent-blue) !important; text-decoration: none !important; }
#path-results blockquote { border-left: 3px solid var(--accent-blue) !important; color: var(--text-secondary) !important; }

/* CHAT */
#chat-panel {
    background: var(--bg-secondary) !important;
    border: 1px solid var(--border-color) !important;
    border-radius: var(--radius-md) !important;
}

.chatbot { background: var(--bg-secondary) !important; border-radius: var(--radius-md) !important; }
.user, .message.user, [data-role="user"] { background: var(--accent-blue) !important; color: white !important; }
.user *, .message.user *, [data-role="user"] * { color: white !important; }
.bot, .message.bot, [data-role="assistant"] { background: var(--bg-tertiary) !important; color: var(--text-primary) !important; }
"""

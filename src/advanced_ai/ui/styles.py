"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Colors come from the registered themes, so the same rules serve the
dark and light palettes.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - single centered column
   ============================================ */
Screen {
    layout: vertical;
    align-horizontal: center;
    background: $background;
}

/* ============================================
   Title Bar - settings / title / theme
   ============================================ */
#title-bar {
    width: 100%;
    max-width: 100;
    height: 5;
    padding: 1 1;
}

#title-bar Button {
    width: 6;
    min-width: 6;
    height: 3;
    border: none;
    background: transparent;
}

#title-block {
    width: 1fr;
    height: 3;
    align-horizontal: center;
}

#app-title {
    width: 100%;
    text-align: center;
    text-style: bold;
    color: $foreground;
}

#app-subtitle {
    width: 100%;
    text-align: center;
    color: $text-muted;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    width: 100%;
    max-width: 100;
    height: 1fr;
    padding: 0 1;
    scrollbar-gutter: stable;
}

/* ============================================
   Message Bubbles
   ============================================ */
.message {
    height: auto;
    max-width: 80%;
    margin: 0 0 1 0;
    padding: 0 1;
}

.message.user {
    margin-left: 20%;
    background: $primary;
    color: white;
}

.message.ai {
    background: $surface;
    color: $foreground;
}

.message.system {
    width: 100%;
    max-width: 100%;
    background: $panel;
    color: $text-muted;
    text-align: center;
}

.message.generating {
    text-style: italic;
    color: $text-muted;
}

.message Markdown {
    margin: 0;
    padding: 0;
    background: transparent;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    display: none;
    width: 100%;
    max-width: 100;
    height: auto;
    min-height: 6;
    max-height: 12;
    border: round $warning 60%;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    width: 100%;
    max-width: 100;
    height: 5;
    padding: 1 1;
}

#chat-input {
    width: 1fr;
    margin-right: 1;
    border: tall $border;
    background: $surface;

    &:disabled {
        opacity: 50%;
    }
}

#send-btn {
    width: 20;
    background: $primary;
    color: white;
    border: none;

    &:disabled {
        opacity: 50%;
    }
}

Footer {
    background: $background;
}
"""

SETTINGS_CSS = """
SettingsScreen {
    align: center middle;
    background: black 70%;
}

#settings-dialog {
    width: 60;
    height: auto;
    max-height: 80%;
    padding: 1 3;
    background: $panel;
    border: round $border;
}

#settings-header {
    height: 3;
    margin-bottom: 1;
}

#settings-title {
    width: 1fr;
    content-align: left middle;
    text-style: bold;
}

#close-settings {
    width: 6;
    min-width: 6;
    border: none;
    background: transparent;
}

.setting-group {
    height: auto;
    margin-bottom: 1;
}

.setting-group Label {
    margin-bottom: 1;
}
"""

"""
Source Templates
Text templates for generated React screens and the application shell.
"""

from string import Template
from typing import Any

from ..models import EventBinding
from .naming import capitalize_first, js_literal

SCREEN_TEMPLATE = Template("""\
import React, { useState, useEffect } from 'react';
import { useNavigate } from 'react-router-dom';
import '../styles/${component}.css';

export const ${component}: React.FC = () => {
  const navigate = useNavigate();

  // State management (generated from Flutter state)
  ${state_hooks}

  // Event handlers (generated from Flutter events)
  ${event_handlers}

  // Live updates from the running Flutter app
  useEffect(() => {
    const ws = new WebSocket('${live_update_url}');

    ws.onmessage = (event) => {
      const message = JSON.parse(event.data);
      if (message.type === 'STATE_UPDATE' && message.screenId === '${screen_id}') {
        ${state_updaters}
      }
    };

    return () => ws.close();
  }, []);

  return (
    <div className="${root_class}">
${body}
    </div>
  );
};

export default ${component};
""")

BUTTON_CLICK_HANDLER = """\
const handleButtonClick = (event: React.MouseEvent) => {
    // Send event to Flutter app
    console.log('Button clicked:', event.currentTarget.id);
  };"""

TEXT_CHANGE_HANDLER = """\
const handleTextChange = (event: React.ChangeEvent<HTMLInputElement>) => {
    // Send text change to Flutter app
    console.log('Text changed:', event.target.value);
  };"""

BASE_APP = """\
import React from 'react';
import { BrowserRouter as Router, Routes, Route } from 'react-router-dom';
import './App.css';

function App() {
  return (
    <Router>
      <div className="flutter-expo-app">
        <Routes>
          {/* Routes will be auto-generated here */}
        </Routes>
      </div>
    </Router>
  );
}

export default App;
"""

BASE_APP_CSS = """\
.flutter-expo-app {
  min-height: 100vh;
}
"""


def state_hooks(state: dict[str, Any]) -> str:
    """One ``useState`` declaration per state key."""
    return "\n  ".join(
        f"const [{key}, set{capitalize_first(key)}] = useState({js_literal(value)});"
        for key, value in state.items()
    )


def state_updaters(state: dict[str, Any]) -> str:
    return "\n        ".join(
        f"if (message.state.{key} !== undefined) set{capitalize_first(key)}(message.state.{key});"
        for key in state
    )


def event_handlers(events: list[EventBinding]) -> str:
    """Stubs for the canonical interactions, followed by the declared bindings."""
    handlers = [BUTTON_CLICK_HANDLER, TEXT_CHANGE_HANDLER]
    if events:
        bindings = "\n  ".join(
            f"// {binding.component_id}.{binding.event} -> {binding.action}" for binding in events
        )
        handlers.append(bindings)
    return "\n\n  ".join(handlers)


def render_screen(
    *,
    component: str,
    screen_id: str,
    root_class: str,
    live_update_url: str,
    state: dict[str, Any],
    events: list[EventBinding],
    body: str,
) -> str:
    return SCREEN_TEMPLATE.substitute(
        component=component,
        screen_id=screen_id,
        root_class=root_class,
        live_update_url=live_update_url,
        state_hooks=state_hooks(state),
        event_handlers=event_handlers(events),
        state_updaters=state_updaters(state),
        body=body,
    )

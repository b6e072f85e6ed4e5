"""File bodies for the Vite + React single-page application."""

from __future__ import annotations

from typing import Any

from ..templates import render

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2022",
        "useDefineForClassFields": True,
        "lib": ["ES2022", "DOM", "DOM.Iterable"],
        "module": "ESNext",
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "isolatedModules": True,
        "moduleDetection": "force",
        "noEmit": True,
        "jsx": "react-jsx",
        "strict": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "noFallthroughCasesInSwitch": True,
        "noUncheckedSideEffectImports": True,
    },
    "include": ["src"],
}

_VITE_CONFIG = {
    False: """\
import { defineConfig } from 'vite';
import react from '@vitejs/plugin-react';

export default defineConfig({
  plugins: [react()],
});
""",
    True: """\
import { defineConfig } from 'vite';
import react from '@vitejs/plugin-react';
import tailwindcss from '@tailwindcss/vite';

export default defineConfig({
  plugins: [react(), tailwindcss()],
});
""",
}

ESLINT_CONFIG = """\
import js from '@eslint/js';
import globals from 'globals';
import reactHooks from 'eslint-plugin-react-hooks';
import reactRefresh from 'eslint-plugin-react-refresh';
import tseslint from 'typescript-eslint';

export default tseslint.config(
  { ignores: ['dist'] },
  {
    extends: [js.configs.recommended, ...tseslint.configs.recommended],
    files: ['**/*.{ts,tsx}'],
    languageOptions: {
      ecmaVersion: 2022,
      globals: globals.browser,
    },
    plugins: {
      'react-hooks': reactHooks,
      'react-refresh': reactRefresh,
    },
    rules: {
      ...reactHooks.configs.recommended.rules,
      'react-refresh/only-export-components': ['warn', { allowConstantExport: true }],
    },
  },
);
"""


def vite_config(tailwind: bool) -> str:
    return _VITE_CONFIG[tailwind]


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

_INDEX_HTML = """\
<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <link rel="icon" type="image/svg+xml" href="/vite.svg" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{{ name | title_case }}</title>
  </head>
  <body>
    <div id="root"></div>
    <script type="module" src="/src/main.tsx"></script>
  </body>
</html>
"""

_MAIN_TSX = """\
import { StrictMode } from 'react';
import { createRoot } from 'react-dom/client';
{% if router %}
import { BrowserRouter } from 'react-router-dom';
{% endif %}
import App from './App';
import './index.css';

createRoot(document.getElementById('root')!).render(
  <StrictMode>
{% if router %}
    <BrowserRouter>
      <App />
    </BrowserRouter>
{% else %}
    <App />
{% endif %}
  </StrictMode>,
);
"""


def index_html(name: str) -> str:
    return render(_INDEX_HTML, name=name)


def main_tsx(router: bool) -> str:
    return render(_MAIN_TSX, router=router)


# ---------------------------------------------------------------------------
# App shell, keyed by (router, tailwind)
# ---------------------------------------------------------------------------

_APP: dict[tuple[bool, bool], str] = {
    (False, False): """\
import Counter from './components/Counter';

function App() {
  return (
    <main className="app">
      <h1>{{ name | title_case }}</h1>
      <Counter />
      <p className="hint">
        Edit <code>src/App.tsx</code> and save to see your changes.
      </p>
    </main>
  );
}

export default App;
""",
    (False, True): """\
import Counter from './components/Counter';

function App() {
  return (
    <main className="flex min-h-screen flex-col items-center justify-center gap-6 bg-slate-50 p-8 text-center">
      <h1 className="text-4xl font-bold text-slate-900">{{ name | title_case }}</h1>
      <Counter />
      <p className="text-slate-500">
        Edit <code className="rounded bg-slate-200 px-1.5 py-0.5">src/App.tsx</code> and save to see your changes.
      </p>
    </main>
  );
}

export default App;
""",
    (True, False): """\
import { NavLink, Route, Routes } from 'react-router-dom';
import HomePage from './pages/HomePage';
import AboutPage from './pages/AboutPage';

function App() {
  return (
    <div className="app">
      <nav className="nav">
        <NavLink to="/" end>
          Home
        </NavLink>
        <NavLink to="/about">About</NavLink>
      </nav>
      <Routes>
        <Route path="/" element={<HomePage />} />
        <Route path="/about" element={<AboutPage />} />
      </Routes>
    </div>
  );
}

export default App;
""",
    (True, True): """\
import { NavLink, Route, Routes } from 'react-router-dom';
import HomePage from './pages/HomePage';
import AboutPage from './pages/AboutPage';

const linkClass = ({ isActive }: { isActive: boolean }) =>
  isActive ? 'font-semibold text-indigo-600' : 'text-slate-600 hover:text-slate-900';

function App() {
  return (
    <div className="min-h-screen bg-slate-50">
      <nav className="flex justify-center gap-6 border-b border-slate-200 bg-white p-4">
        <NavLink to="/" end className={linkClass}>
          Home
        </NavLink>
        <NavLink to="/about" className={linkClass}>
          About
        </NavLink>
      </nav>
      <Routes>
        <Route path="/" element={<HomePage />} />
        <Route path="/about" element={<AboutPage />} />
      </Routes>
    </div>
  );
}

export default App;
""",
}


def app_tsx(name: str, router: bool, tailwind: bool) -> str:
    return render(_APP[(router, tailwind)], name=name)


# ---------------------------------------------------------------------------
# Counter component, keyed by (tailwind, zustand)
# ---------------------------------------------------------------------------

_COUNTER: dict[tuple[bool, bool], str] = {
    (False, False): """\
import { useState } from 'react';

function Counter() {
  const [count, setCount] = useState(0);

  return (
    <div className="card">
      <button onClick={() => setCount((value) => value + 1)}>Count: {count}</button>
    </div>
  );
}

export default Counter;
""",
    (False, True): """\
import { useCounterStore } from '../store/counterStore';

function Counter() {
  const { count, increment, decrement, reset } = useCounterStore();

  return (
    <div className="card">
      <p className="count">Count: {count}</p>
      <div className="actions">
        <button onClick={decrement}>-</button>
        <button onClick={reset}>Reset</button>
        <button onClick={increment}>+</button>
      </div>
    </div>
  );
}

export default Counter;
""",
    (True, False): """\
import { useState } from 'react';

function Counter() {
  const [count, setCount] = useState(0);

  return (
    <div className="rounded-xl bg-white p-8 shadow">
      <button
        className="rounded-lg bg-indigo-600 px-6 py-3 font-medium text-white transition hover:bg-indigo-500"
        onClick={() => setCount((value) => value + 1)}
      >
        Count: {count}
      </button>
    </div>
  );
}

export default Counter;
""",
    (True, True): """\
import { useCounterStore } from '../store/counterStore';

const buttonClass =
  'rounded-lg bg-indigo-600 px-4 py-2 font-medium text-white transition hover:bg-indigo-500';

function Counter() {
  const { count, increment, decrement, reset } = useCounterStore();

  return (
    <div className="rounded-xl bg-white p-8 shadow">
      <p className="mb-4 text-2xl font-semibold text-slate-900">Count: {count}</p>
      <div className="flex gap-3">
        <button className={buttonClass} onClick={decrement}>
          -
        </button>
        <button className={buttonClass} onClick={reset}>
          Reset
        </button>
        <button className={buttonClass} onClick={increment}>
          +
        </button>
      </div>
    </div>
  );
}

export default Counter;
""",
}


def counter_tsx(tailwind: bool, zustand: bool) -> str:
    return _COUNTER[(tailwind, zustand)]


# ---------------------------------------------------------------------------
# Router pages, keyed by tailwind
# ---------------------------------------------------------------------------

_HOME_PAGE = {
    False: """\
import Counter from '../components/Counter';

function HomePage() {
  return (
    <main className="page">
      <h1>{{ name | title_case }}</h1>
      <Counter />
      <p className="hint">
        Edit <code>src/pages/HomePage.tsx</code> and save to see your changes.
      </p>
    </main>
  );
}

export default HomePage;
""",
    True: """\
import Counter from '../components/Counter';

function HomePage() {
  return (
    <main className="flex flex-col items-center gap-6 p-12 text-center">
      <h1 className="text-4xl font-bold text-slate-900">{{ name | title_case }}</h1>
      <Counter />
      <p className="text-slate-500">
        Edit <code className="rounded bg-slate-200 px-1.5 py-0.5">src/pages/HomePage.tsx</code> and save to see your changes.
      </p>
    </main>
  );
}

export default HomePage;
""",
}

_ABOUT_PAGE = {
    False: """\
function AboutPage() {
  return (
    <main className="page">
      <h1>About</h1>
      <p>This page is rendered by React Router.</p>
    </main>
  );
}

export default AboutPage;
""",
    True: """\
function AboutPage() {
  return (
    <main className="flex flex-col items-center gap-4 p-12 text-center">
      <h1 className="text-3xl font-bold text-slate-900">About</h1>
      <p className="text-slate-600">This page is rendered by React Router.</p>
    </main>
  );
}

export default AboutPage;
""",
}


def home_page_tsx(name: str, tailwind: bool) -> str:
    return render(_HOME_PAGE[tailwind], name=name)


def about_page_tsx(tailwind: bool) -> str:
    return _ABOUT_PAGE[tailwind]


# ---------------------------------------------------------------------------
# Styles and assets
# ---------------------------------------------------------------------------

_TAILWIND_CSS = """\
@import "tailwindcss";
"""

_PLAIN_CSS = """\
:root {
  font-family: system-ui, -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
  line-height: 1.5;
  font-weight: 400;
  color: #213547;
  background-color: #ffffff;
}

* {
  box-sizing: border-box;
  margin: 0;
  padding: 0;
}

body {
  min-height: 100vh;
}

.app,
.page {
  max-width: 640px;
  margin: 0 auto;
  padding: 2rem;
  text-align: center;
}

.nav {
  display: flex;
  justify-content: center;
  gap: 1.5rem;
  padding: 1rem;
  border-bottom: 1px solid #e5e7eb;
}

.nav a {
  color: #4b5563;
  text-decoration: none;
}

.nav a.active {
  color: #646cff;
  font-weight: 600;
}

h1 {
  font-size: 2.5rem;
  margin: 1.5rem 0;
}

.card {
  padding: 2rem;
}

.count {
  font-size: 1.5rem;
  margin-bottom: 1rem;
}

.actions {
  display: flex;
  justify-content: center;
  gap: 0.75rem;
}

button {
  padding: 0.75rem 1.5rem;
  font-size: 1rem;
  font-weight: 500;
  background-color: #646cff;
  color: white;
  border: none;
  border-radius: 8px;
  cursor: pointer;
  transition: background-color 0.2s;
}

button:hover {
  background-color: #535bf2;
}

.hint {
  margin-top: 1.5rem;
  color: #888;
}

code {
  background-color: #f4f4f4;
  padding: 0.2rem 0.4rem;
  border-radius: 4px;
  font-size: 0.9rem;
}
"""


def index_css(tailwind: bool) -> str:
    return _TAILWIND_CSS if tailwind else _PLAIN_CSS


VITE_SVG = """\
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 257">
  <path fill="#646CFF" d="m128 0 128 44.5-20.8 171.2L128 257 21.2 215.7.4 44.5z"/>
  <path fill="#fff" d="M96 160V80l80 40z"/>
</svg>
"""


# ---------------------------------------------------------------------------
# README
# ---------------------------------------------------------------------------

_STRUCTURE = """\
{{ name }}/
├── public/
├── src/
│   ├── components/
│   ├── hooks/
{% if router %}
│   ├── pages/
{% endif %}
{% if zustand %}
│   ├── store/
{% endif %}
│   ├── types/
│   ├── utils/
│   ├── App.tsx
│   ├── index.css
│   └── main.tsx
├── index.html
├── package.json
├── tsconfig.json
└── vite.config.ts
"""


def structure_tree(name: str, router: bool, zustand: bool) -> str:
    return render(_STRUCTURE, name=name, router=router, zustand=zustand)

"""File bodies for the Next.js App Router project."""

from __future__ import annotations

from typing import Any

from ..templates import render

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2017",
        "lib": ["dom", "dom.iterable", "esnext"],
        "allowJs": True,
        "skipLibCheck": True,
        "strict": True,
        "noEmit": True,
        "esModuleInterop": True,
        "module": "esnext",
        "moduleResolution": "bundler",
        "resolveJsonModule": True,
        "isolatedModules": True,
        "jsx": "preserve",
        "incremental": True,
        "plugins": [{"name": "next"}],
        "paths": {"@/*": ["./src/*"]},
    },
    "include": ["next-env.d.ts", "**/*.ts", "**/*.tsx", ".next/types/**/*.ts"],
    "exclude": ["node_modules"],
}

NEXT_CONFIG = """\
import type { NextConfig } from 'next';

const nextConfig: NextConfig = {
  reactStrictMode: true,
};

export default nextConfig;
"""

NEXT_ENV = """\
/// <reference types="next" />
/// <reference types="next/image-types/global" />

// NOTE: This file should not be edited
// see https://nextjs.org/docs/app/api-reference/config/typescript for more information.
"""

POSTCSS_CONFIG = """\
const config = {
  plugins: {
    '@tailwindcss/postcss': {},
  },
};

export default config;
"""

# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------

_GLOBALS_CSS = {
    True: """\
@import "tailwindcss";

:root {
  --background: #ffffff;
  --foreground: #171717;
}

body {
  background: var(--background);
  color: var(--foreground);
}
""",
    False: """\
:root {
  --background: #ffffff;
  --foreground: #171717;
  --primary: #0070f3;
  --font-family: system-ui, -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
}

* {
  box-sizing: border-box;
  margin: 0;
  padding: 0;
}

html,
body {
  max-width: 100vw;
  overflow-x: hidden;
}

body {
  color: var(--foreground);
  background: var(--background);
  font-family: var(--font-family);
}

a {
  color: inherit;
  text-decoration: none;
}
""",
}

PAGE_MODULE_CSS = """\
.main {
  display: flex;
  min-height: 100vh;
  flex-direction: column;
  align-items: center;
  justify-content: center;
  gap: 2rem;
  padding: 4rem 2rem;
  text-align: center;
}

.title {
  font-size: 2.5rem;
  font-weight: 700;
}

.description {
  color: #666;
}

.counter {
  display: flex;
  align-items: center;
  gap: 1rem;
}

.count {
  min-width: 3rem;
  font-size: 1.5rem;
  font-weight: 600;
}

.button {
  padding: 0.6rem 1.2rem;
  border: none;
  border-radius: 8px;
  background: var(--primary);
  color: #fff;
  font-size: 1rem;
  cursor: pointer;
}

.button:hover {
  opacity: 0.9;
}
"""


def globals_css(tailwind: bool) -> str:
    return _GLOBALS_CSS[tailwind]


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

_LAYOUT = """\
import type { Metadata } from 'next';
import './globals.css';

export const metadata: Metadata = {
  title: '{{ name | title_case }}',
  description: 'Generated by create-project',
};

export default function RootLayout({
  children,
}: Readonly<{
  children: React.ReactNode;
}>) {
  return (
    <html lang="en">
{% if tailwind %}
      <body className="antialiased">{children}</body>
{% else %}
      <body>{children}</body>
{% endif %}
    </html>
  );
}
"""


def layout_tsx(name: str, tailwind: bool) -> str:
    return render(_LAYOUT, name=name, tailwind=tailwind)


# ---------------------------------------------------------------------------
# Entry page, keyed by (tailwind, zustand)
# ---------------------------------------------------------------------------

_PAGE: dict[tuple[bool, bool], str] = {
    (False, False): """\
import styles from './page.module.css';

export default function Home() {
  return (
    <main className={styles.main}>
      <h1 className={styles.title}>{{ name | title_case }}</h1>
      <p className={styles.description}>
        Get started by editing <code>src/app/page.tsx</code>
      </p>
    </main>
  );
}
""",
    (False, True): """\
'use client';

import { useCounterStore } from '@/store/counterStore';
import styles from './page.module.css';

export default function Home() {
  const { count, increment, decrement, reset } = useCounterStore();

  return (
    <main className={styles.main}>
      <h1 className={styles.title}>{{ name | title_case }}</h1>
      <div className={styles.counter}>
        <button className={styles.button} onClick={decrement}>
          -
        </button>
        <span className={styles.count}>{count}</span>
        <button className={styles.button} onClick={increment}>
          +
        </button>
      </div>
      <button className={styles.button} onClick={reset}>
        Reset
      </button>
      <p className={styles.description}>
        Get started by editing <code>src/app/page.tsx</code>
      </p>
    </main>
  );
}
""",
    (True, False): """\
export default function Home() {
  return (
    <main className="flex min-h-screen flex-col items-center justify-center gap-6 p-16 text-center">
      <h1 className="text-4xl font-bold">{{ name | title_case }}</h1>
      <p className="text-gray-600">
        Get started by editing{' '}
        <code className="rounded bg-gray-100 px-1.5 py-0.5 font-mono">src/app/page.tsx</code>
      </p>
    </main>
  );
}
""",
    (True, True): """\
'use client';

import { useCounterStore } from '@/store/counterStore';

const buttonClass = 'rounded-lg bg-blue-600 px-4 py-2 font-medium text-white hover:bg-blue-500';

export default function Home() {
  const { count, increment, decrement, reset } = useCounterStore();

  return (
    <main className="flex min-h-screen flex-col items-center justify-center gap-8 p-16 text-center">
      <h1 className="text-4xl font-bold">{{ name | title_case }}</h1>
      <div className="flex items-center gap-4">
        <button className={buttonClass} onClick={decrement}>
          -
        </button>
        <span className="min-w-12 text-2xl font-semibold">{count}</span>
        <button className={buttonClass} onClick={increment}>
          +
        </button>
      </div>
      <button className={buttonClass} onClick={reset}>
        Reset
      </button>
      <p className="text-gray-600">
        Get started by editing{' '}
        <code className="rounded bg-gray-100 px-1.5 py-0.5 font-mono">src/app/page.tsx</code>
      </p>
    </main>
  );
}
""",
}


def page_tsx(name: str, tailwind: bool, zustand: bool) -> str:
    return render(_PAGE[(tailwind, zustand)], name=name)


# ---------------------------------------------------------------------------
# README
# ---------------------------------------------------------------------------

_STRUCTURE = """\
{{ name }}/
├── public/
├── src/
│   ├── app/
│   │   ├── globals.css
│   │   ├── layout.tsx
│   │   └── page.tsx
│   ├── components/
│   ├── lib/
{% if zustand %}
│   ├── store/
{% endif %}
│   └── types/
├── next.config.ts
├── package.json
└── tsconfig.json
"""


def structure_tree(name: str, zustand: bool) -> str:
    return render(_STRUCTURE, name=name, zustand=zustand)

"""File bodies for the Astro static site.

Each page-level file comes in two variants, plain CSS and Tailwind CSS.
Tailwind v4 is wired through its Vite plugin in ``astro.config.mjs``.
"""

from __future__ import annotations

from typing import Any

from ..templates import render

TSCONFIG: dict[str, Any] = {
    "extends": "astro/tsconfigs/strict",
    "include": [".astro/types.d.ts", "**/*"],
    "exclude": ["dist"],
    "compilerOptions": {
        "baseUrl": ".",
        "paths": {
            "@components/*": ["src/components/*"],
            "@layouts/*": ["src/layouts/*"],
            "@styles/*": ["src/styles/*"],
        },
    },
}

_ASTRO_CONFIG = {
    False: """\
import { defineConfig } from 'astro/config';

export default defineConfig({});
""",
    True: """\
import { defineConfig } from 'astro/config';
import tailwindcss from '@tailwindcss/vite';

export default defineConfig({
  vite: {
    plugins: [tailwindcss()],
  },
});
""",
}


def astro_config(tailwind: bool) -> str:
    return _ASTRO_CONFIG[tailwind]


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------

_GLOBAL_CSS = {
    True: """\
@import "tailwindcss";
""",
    False: """\
:root {
  --color-text: #333;
  --color-background: #fff;
  --color-primary: #4f46e5;
  --font-family: system-ui, -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
}

* {
  box-sizing: border-box;
  margin: 0;
  padding: 0;
}

html {
  font-family: var(--font-family);
  color: var(--color-text);
  background-color: var(--color-background);
}

body {
  min-height: 100vh;
  display: flex;
  flex-direction: column;
}

a {
  color: var(--color-primary);
  text-decoration: none;
}

a:hover {
  text-decoration: underline;
}
""",
}


def global_css(tailwind: bool) -> str:
    return _GLOBAL_CSS[tailwind]


# ---------------------------------------------------------------------------
# Layout and components
# ---------------------------------------------------------------------------

_BASE_LAYOUT = """\
---
import '../styles/global.css';

interface Props {
  title: string;
  description?: string;
}

const { title, description = '{{ name | title_case }}, built with Astro' } = Astro.props;
---

<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <meta name="description" content={description} />
    <link rel="icon" type="image/svg+xml" href="/favicon.svg" />
    <title>{title}</title>
  </head>
{% if tailwind %}
  <body class="flex min-h-screen flex-col bg-gray-50">
{% else %}
  <body>
{% endif %}
    <slot />
  </body>
</html>
"""

_HEADER = {
    True: """\
---
interface Props {
  siteName?: string;
}

const { siteName = '{{ name | title_case }}' } = Astro.props;
---

<header class="bg-white shadow-sm">
  <nav class="mx-auto flex max-w-4xl items-center justify-between px-4 py-4">
    <a href="/" class="text-xl font-bold text-indigo-600 hover:text-indigo-700">{siteName}</a>
    <ul class="flex gap-6">
      <li><a href="/" class="font-medium text-gray-700 hover:text-indigo-600">Home</a></li>
      <li><a href="/about" class="font-medium text-gray-700 hover:text-indigo-600">About</a></li>
    </ul>
  </nav>
</header>
""",
    False: """\
---
interface Props {
  siteName?: string;
}

const { siteName = '{{ name | title_case }}' } = Astro.props;
---

<header>
  <nav>
    <a href="/" class="logo">{siteName}</a>
    <ul>
      <li><a href="/">Home</a></li>
      <li><a href="/about">About</a></li>
    </ul>
  </nav>
</header>

<style>
  header {
    padding: 1rem 2rem;
    border-bottom: 1px solid #eee;
  }

  nav {
    max-width: 1200px;
    margin: 0 auto;
    display: flex;
    justify-content: space-between;
    align-items: center;
  }

  .logo {
    font-weight: 700;
    font-size: 1.25rem;
  }

  ul {
    display: flex;
    gap: 1.5rem;
    list-style: none;
  }

  a {
    color: var(--color-text);
    transition: color 0.2s;
  }

  a:hover {
    color: var(--color-primary);
    text-decoration: none;
  }
</style>
""",
}

_FOOTER = {
    True: """\
---
const year = new Date().getFullYear();
---

<footer class="mt-auto border-t border-gray-200 py-8 text-center">
  <p class="text-sm text-gray-500">&copy; {year} {{ name | title_case }}. Built with Astro.</p>
</footer>
""",
    False: """\
---
const year = new Date().getFullYear();
---

<footer>
  <p>&copy; {year} {{ name | title_case }}. Built with Astro.</p>
</footer>

<style>
  footer {
    padding: 2rem;
    text-align: center;
    border-top: 1px solid #eee;
    margin-top: auto;
  }

  p {
    color: #666;
    font-size: 0.875rem;
  }
</style>
""",
}


def base_layout(name: str, tailwind: bool) -> str:
    return render(_BASE_LAYOUT, name=name, tailwind=tailwind)


def header(name: str, tailwind: bool) -> str:
    return render(_HEADER[tailwind], name=name)


def footer(name: str, tailwind: bool) -> str:
    return render(_FOOTER[tailwind], name=name)


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------

_INDEX_PAGE = {
    True: """\
---
import BaseLayout from '../layouts/BaseLayout.astro';
import Header from '../components/Header.astro';
import Footer from '../components/Footer.astro';
---

<BaseLayout title="{{ name | title_case }}">
  <Header />
  <main class="flex-1">
    <section class="mx-auto max-w-3xl px-4 py-16 text-center">
      <h1 class="mb-4 text-4xl font-bold text-gray-900">Welcome to {{ name | title_case }}</h1>
      <p class="mb-8 text-xl text-gray-600">Your new Astro site is ready.</p>
      <a
        href="/about"
        class="inline-block rounded-lg bg-indigo-600 px-6 py-3 font-medium text-white transition-colors hover:bg-indigo-700"
      >
        Learn more
      </a>
    </section>
  </main>
  <Footer />
</BaseLayout>
""",
    False: """\
---
import BaseLayout from '../layouts/BaseLayout.astro';
import Header from '../components/Header.astro';
import Footer from '../components/Footer.astro';
---

<BaseLayout title="{{ name | title_case }}">
  <Header />
  <main>
    <section class="hero">
      <h1>Welcome to {{ name | title_case }}</h1>
      <p>Your new Astro site is ready.</p>
      <a href="/about" class="button">Learn more</a>
    </section>
  </main>
  <Footer />
</BaseLayout>

<style>
  main {
    flex: 1;
  }

  .hero {
    max-width: 800px;
    margin: 0 auto;
    padding: 4rem 2rem;
    text-align: center;
  }

  h1 {
    font-size: 2.5rem;
    margin-bottom: 1rem;
  }

  p {
    font-size: 1.25rem;
    color: #666;
    margin-bottom: 2rem;
  }

  .button {
    display: inline-block;
    padding: 0.75rem 1.5rem;
    background-color: var(--color-primary);
    color: white;
    border-radius: 0.5rem;
    font-weight: 500;
  }

  .button:hover {
    opacity: 0.9;
    text-decoration: none;
  }
</style>
""",
}

_ABOUT_PAGE = {
    True: """\
---
import BaseLayout from '../layouts/BaseLayout.astro';
import Header from '../components/Header.astro';
import Footer from '../components/Footer.astro';
---

<BaseLayout title="About | {{ name | title_case }}">
  <Header />
  <main class="flex-1">
    <section class="mx-auto max-w-3xl px-4 py-16">
      <h1 class="mb-6 text-3xl font-bold text-gray-900">About</h1>
      <p class="mb-4 text-gray-600">
        This site is built with Astro, a framework for fast, content-focused websites.
      </p>
      <a href="/" class="font-medium text-indigo-600 hover:text-indigo-700">&larr; Back home</a>
    </section>
  </main>
  <Footer />
</BaseLayout>
""",
    False: """\
---
import BaseLayout from '../layouts/BaseLayout.astro';
import Header from '../components/Header.astro';
import Footer from '../components/Footer.astro';
---

<BaseLayout title="About | {{ name | title_case }}">
  <Header />
  <main>
    <section class="content">
      <h1>About</h1>
      <p>This site is built with Astro, a framework for fast, content-focused websites.</p>
      <a href="/">&larr; Back home</a>
    </section>
  </main>
  <Footer />
</BaseLayout>

<style>
  main {
    flex: 1;
  }

  .content {
    max-width: 800px;
    margin: 0 auto;
    padding: 4rem 2rem;
  }

  h1 {
    font-size: 2rem;
    margin-bottom: 1.5rem;
  }

  p {
    color: #666;
    margin-bottom: 1rem;
  }
</style>
""",
}


def index_page(name: str, tailwind: bool) -> str:
    return render(_INDEX_PAGE[tailwind], name=name)


def about_page(name: str, tailwind: bool) -> str:
    return render(_ABOUT_PAGE[tailwind], name=name)


# ---------------------------------------------------------------------------
# README
# ---------------------------------------------------------------------------

_STRUCTURE = """\
{{ name }}/
├── public/
│   └── favicon.svg
├── src/
│   ├── components/
│   │   ├── Footer.astro
│   │   └── Header.astro
│   ├── layouts/
│   │   └── BaseLayout.astro
│   ├── pages/
│   │   ├── about.astro
│   │   └── index.astro
│   └── styles/
│       └── global.css
├── astro.config.mjs
├── package.json
└── tsconfig.json
"""

RESOURCES = """\
## Learn more

- [Astro documentation](https://docs.astro.build)
- [Astro Discord](https://astro.build/chat)
"""

TAILWIND_RESOURCE = "- [Tailwind CSS documentation](https://tailwindcss.com/docs)\n"


def structure_tree(name: str) -> str:
    return render(_STRUCTURE, name=name)


def resources(tailwind: bool) -> str:
    return RESOURCES + (TAILWIND_RESOURCE if tailwind else "")

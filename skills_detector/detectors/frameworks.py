"""Framework detection catalog."""

from __future__ import annotations

from typing import List, Tuple

from .base import evaluate_catalog
from ..models import DetectionRule, SignalContext

# Ordered by specificity: meta-frameworks before the view libraries they wrap.
FRAMEWORK_RULES: Tuple[DetectionRule, ...] = (
    # JavaScript / TypeScript
    DetectionRule(
        "nextjs",
        marker_files=("next.config.js", "next.config.ts", "next.config.mjs", "next.config.cjs"),
        dependencies=("next",),
    ),
    DetectionRule(
        "remix",
        marker_files=("remix.config.js", "remix.config.ts"),
        dependencies=("@remix-run/react", "@remix-run/node"),
    ),
    DetectionRule(
        "astro",
        marker_files=("astro.config.mjs", "astro.config.ts", "astro.config.js"),
        dependencies=("astro",),
    ),
    DetectionRule(
        "nuxt",
        marker_files=("nuxt.config.js", "nuxt.config.ts"),
        dependencies=("nuxt", "nuxt3"),
    ),
    DetectionRule(
        "sveltekit",
        marker_files=("svelte.config.js", "svelte.config.ts"),
        dependencies=("@sveltejs/kit",),
    ),
    DetectionRule("svelte", dependencies=("svelte",)),
    DetectionRule(
        "vue",
        marker_files=("vue.config.js",),
        dependencies=("vue", "@vue/cli-service"),
    ),
    DetectionRule(
        "angular",
        marker_files=("angular.json",),
        dependencies=("@angular/core",),
    ),
    DetectionRule(
        "gatsby",
        marker_files=("gatsby-config.js", "gatsby-config.ts"),
        dependencies=("gatsby",),
    ),
    # vite.config.* is shared with vitest, so only the dependency counts.
    DetectionRule("vite", dependencies=("vite",)),
    DetectionRule("express", dependencies=("express",)),
    DetectionRule("fastify", dependencies=("fastify",)),
    DetectionRule("hono", dependencies=("hono",)),
    DetectionRule("elysia", dependencies=("elysia",)),
    DetectionRule("nest", dependencies=("@nestjs/core",)),
    # Platform ecosystems; also consulted by the relevance veto.
    DetectionRule("react-native", dependencies=("react-native", "expo")),
    DetectionRule("electron", dependencies=("electron",)),
    DetectionRule("react", dependencies=("react", "react-dom")),
    DetectionRule("flutter", marker_files=("pubspec.yaml",)),
    DetectionRule(
        "ios",
        marker_files=("ios/Podfile", "Podfile", "*.xcodeproj", "*.xcworkspace"),
    ),
    DetectionRule(
        "android",
        marker_files=("android/build.gradle", "app/src/main/AndroidManifest.xml"),
    ),
    DetectionRule("unity", required_files=("Assets/", "ProjectSettings/ProjectVersion.txt")),
    DetectionRule("arduino", marker_files=("platformio.ini", "*.ino")),
    # Python
    DetectionRule("django", marker_files=("manage.py",), required_files=("manage.py",)),
    DetectionRule("flask", marker_files=("app.py",)),
    DetectionRule("fastapi", marker_files=("main.py",)),
    # Ruby
    DetectionRule(
        "rails",
        marker_files=("config/application.rb",),
        required_files=("Gemfile", "config/application.rb"),
    ),
    # Declared without clauses: their manifests (Gemfile, go.mod, Cargo.toml)
    # are not parsed, so these never match.
    DetectionRule("sinatra"),
    DetectionRule("gin"),
    DetectionRule("echo"),
    DetectionRule("fiber"),
    DetectionRule("actix"),
    DetectionRule("axum"),
    DetectionRule("rocket"),
    # JVM
    DetectionRule("spring", marker_files=("pom.xml", "build.gradle", "build.gradle.kts")),
)


def detect_frameworks(context: SignalContext) -> List[str]:
    """Detect frameworks in the project, in catalog order."""
    return evaluate_catalog(FRAMEWORK_RULES, context)


__all__ = ["FRAMEWORK_RULES", "detect_frameworks"]

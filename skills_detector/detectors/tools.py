"""Tool and library detection catalog."""

from __future__ import annotations

from typing import List, Tuple

from .base import evaluate_catalog
from .supersession import filter_superseded
from ..models import DetectionRule, SignalContext

TOOL_RULES: Tuple[DetectionRule, ...] = (
    # ORMs & databases
    DetectionRule(
        "prisma",
        marker_files=("prisma/schema.prisma",),
        dependencies=("prisma", "@prisma/client"),
    ),
    DetectionRule(
        "drizzle",
        marker_files=("drizzle.config.ts", "drizzle.config.js"),
        dependencies=("drizzle-orm",),
    ),
    DetectionRule("typeorm", dependencies=("typeorm",)),
    DetectionRule("sequelize", dependencies=("sequelize",)),
    DetectionRule("mongoose", dependencies=("mongoose",)),
    DetectionRule("kysely", dependencies=("kysely",)),
    # CSS & styling
    DetectionRule(
        "tailwind",
        marker_files=(
            "tailwind.config.js",
            "tailwind.config.ts",
            "tailwind.config.mjs",
            "tailwind.config.cjs",
        ),
        dependencies=("tailwindcss",),
    ),
    DetectionRule("styled-components", dependencies=("styled-components",)),
    DetectionRule("emotion", dependencies=("@emotion/react", "@emotion/styled")),
    DetectionRule("sass", dependencies=("sass", "node-sass")),
    DetectionRule("less", dependencies=("less",)),
    # Build tools
    DetectionRule(
        "webpack",
        marker_files=("webpack.config.js", "webpack.config.ts"),
        dependencies=("webpack",),
    ),
    DetectionRule("esbuild", dependencies=("esbuild",)),
    DetectionRule(
        "rollup",
        marker_files=("rollup.config.js", "rollup.config.ts"),
        dependencies=("rollup",),
    ),
    DetectionRule(
        "turbopack",
        dependencies=("@serwist/turbopack", "@vercel/turbopack", "turbopack"),
    ),
    DetectionRule("turborepo", marker_files=("turbo.json",), dependencies=("turbo",)),
    # State management
    DetectionRule("redux", dependencies=("redux", "@reduxjs/toolkit")),
    DetectionRule("zustand", dependencies=("zustand",)),
    DetectionRule("jotai", dependencies=("jotai",)),
    DetectionRule("recoil", dependencies=("recoil",)),
    DetectionRule("mobx", dependencies=("mobx",)),
    # API & data fetching
    DetectionRule("graphql", dependencies=("graphql", "@apollo/client", "urql")),
    DetectionRule("trpc", dependencies=("@trpc/server", "@trpc/client")),
    DetectionRule("tanstack-query", dependencies=("@tanstack/react-query", "react-query")),
    DetectionRule("swr", dependencies=("swr",)),
    DetectionRule("axios", dependencies=("axios",)),
    # Authentication
    DetectionRule("nextauth", dependencies=("next-auth",)),
    DetectionRule("clerk", dependencies=("@clerk/nextjs", "@clerk/clerk-react")),
    DetectionRule("auth0", dependencies=("@auth0/nextjs-auth0", "@auth0/auth0-react")),
    DetectionRule(
        "supabase",
        dependencies=("@supabase/supabase-js", "@supabase/auth-helpers-nextjs"),
    ),
    DetectionRule("firebase", dependencies=("firebase", "firebase-admin")),
    # DevOps & infrastructure
    DetectionRule(
        "docker",
        marker_files=("Dockerfile", "docker-compose.yml", "docker-compose.yaml"),
    ),
    DetectionRule("kubernetes", marker_files=("k8s/", "kubernetes/", "helm/")),
    DetectionRule("terraform", marker_files=("main.tf", "terraform/")),
    DetectionRule("pulumi", marker_files=("Pulumi.yaml",)),
    # Linting & formatting
    DetectionRule(
        "eslint",
        marker_files=(".eslintrc", ".eslintrc.js", ".eslintrc.json", "eslint.config.js"),
        dependencies=("eslint",),
    ),
    DetectionRule(
        "prettier",
        marker_files=(".prettierrc", ".prettierrc.js", ".prettierrc.json", "prettier.config.js"),
        dependencies=("prettier",),
    ),
    DetectionRule(
        "biome",
        marker_files=("biome.json", "biome.jsonc"),
        dependencies=("@biomejs/biome",),
    ),
    # Monorepo tools
    DetectionRule("nx", marker_files=("nx.json",), dependencies=("nx",)),
    DetectionRule("lerna", marker_files=("lerna.json",), dependencies=("lerna",)),
    DetectionRule("changesets", marker_files=(".changeset/",), dependencies=("@changesets/cli",)),
    # Documentation
    DetectionRule(
        "storybook",
        marker_files=(".storybook/",),
        dependencies=("@storybook/react", "storybook"),
    ),
    DetectionRule("docusaurus", dependencies=("@docusaurus/core",)),
    # AI & ML
    DetectionRule("openai", dependencies=("openai",)),
    DetectionRule("anthropic", dependencies=("@anthropic-ai/sdk",)),
    DetectionRule("langchain", dependencies=("langchain", "@langchain/core")),
    DetectionRule("vercel-ai", dependencies=("ai",)),
)


def detect_tools(context: SignalContext) -> List[str]:
    """Detect tools and libraries, dropping entries superseded by a newer tool."""
    return filter_superseded(evaluate_catalog(TOOL_RULES, context))


__all__ = ["TOOL_RULES", "detect_tools"]

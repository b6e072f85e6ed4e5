"""Express + TypeScript API server generator.

The server is the framework with the most optional pieces.  Database,
authentication, API docs and containerisation each add packages, env
variables, files and registration lines, and the three must stay in step:
the generator derives all of them from the same ``ExpressOptions``.
"""

from __future__ import annotations

from ..models import Database, ExpressOptions, Framework
from .generator import Artifact, ProjectGenerator
from .manifest import ManifestSpec
from .readme import ReadmeOptions, ReadmeSection, command_table, structure_section
from .snippets import render_env_file
from .sources import express
from .workflows import WorkflowOptions


class ExpressGenerator(ProjectGenerator):
    """REST API server on Express 5."""

    framework = Framework.EXPRESS
    options: ExpressOptions

    def directories(self) -> list[str]:
        dirs = [
            "src/config",
            "src/controllers",
            "src/middlewares",
            "src/routes",
            "src/services",
            "src/types",
            "src/utils",
        ]
        if self.options.database is Database.MONGODB:
            dirs.append("src/models")
        elif self.options.database is Database.POSTGRESQL:
            dirs.append("prisma")
        return dirs

    def manifest_spec(self) -> ManifestSpec:
        opts = self.options
        packages = ManifestSpec(
            dependencies=["express", "cors", "helmet", "dotenv", "zod"],
            dev_dependencies=[
                "@types/express",
                "@types/cors",
                "@types/node",
                "typescript",
                "tsx",
                "eslint",
                "@eslint/js",
                "typescript-eslint",
            ],
            scripts={
                "dev": "tsx watch src/server.ts",
                "build": "tsc",
                "start": "node dist/server.js",
                "lint": "eslint src/",
            },
        )
        if opts.database is Database.MONGODB:
            packages.add(dependencies=["mongoose"])
        elif opts.database is Database.POSTGRESQL:
            packages.add(
                dependencies=["@prisma/client"],
                dev_dependencies=["prisma"],
                scripts={
                    "db:generate": "prisma generate",
                    "db:push": "prisma db push",
                    "db:migrate": "prisma migrate dev",
                    "db:studio": "prisma studio",
                },
            )
        if opts.authentication:
            packages.add(
                dependencies=["bcrypt", "jsonwebtoken"],
                dev_dependencies=["@types/bcrypt", "@types/jsonwebtoken"],
            )
        if opts.swagger:
            packages.add(
                dependencies=["swagger-ui-express", "swagger-jsdoc"],
                dev_dependencies=["@types/swagger-ui-express", "@types/swagger-jsdoc"],
            )
        return packages

    def config_files(self) -> dict[str, Artifact]:
        opts = self.options
        env = render_env_file(express.env_sections(self.name, opts))
        files: dict[str, Artifact] = {
            "tsconfig.json": express.TSCONFIG,
            "eslint.config.js": express.ESLINT_CONFIG,
            ".gitignore": self.gitignore(),
            ".env.example": env,
            ".env": env,
        }
        if opts.database is Database.POSTGRESQL:
            files["prisma/schema.prisma"] = express.prisma_schema(opts)
        if opts.docker:
            files["docker-compose.yml"] = express.docker_compose(self.name, opts)
            files["Dockerfile"] = express.dockerfile(
                opts, self.config.package_manager, self.settings.ci.node_version
            )
            files[".dockerignore"] = express.DOCKERIGNORE
        return files

    def workflow_options(self) -> WorkflowOptions:
        options = super().workflow_options()
        options.database = self.options.database
        return options

    def source_files(self) -> dict[str, Artifact]:
        opts = self.options
        files: dict[str, Artifact] = {
            "src/config/index.ts": express.config_index_ts(self.name, opts),
        }
        if opts.has_database:
            files["src/config/database.ts"] = express.database_ts(opts.database)
        if opts.swagger:
            files["src/config/swagger.ts"] = express.swagger_ts(self.name, opts)

        files["src/types/index.ts"] = express.types_ts(opts)
        files["src/middlewares/errorHandler.ts"] = express.ERROR_HANDLER
        files["src/middlewares/asyncHandler.ts"] = express.ASYNC_HANDLER
        if opts.authentication:
            files["src/middlewares/auth.ts"] = express.AUTH_MIDDLEWARE

        if opts.database is Database.MONGODB:
            files["src/models/User.ts"] = express.user_model_ts(opts)
            files["src/models/index.ts"] = express.MODELS_INDEX

        files["src/controllers/healthController.ts"] = express.HEALTH_CONTROLLER
        if opts.authentication:
            files["src/controllers/authController.ts"] = express.auth_controller_ts(
                opts.database
            )
        if opts.has_database:
            files["src/controllers/userController.ts"] = express.user_controller_ts(
                opts.database
            )

        for module, body in express.route_files(opts).items():
            files[f"src/routes/{module}.ts"] = body

        files["src/app.ts"] = express.app_ts(opts)
        files["src/server.ts"] = express.server_ts(opts)
        return files

    def readme_options(self) -> ReadmeOptions:
        opts = self.options
        features = ["Express 5", "TypeScript", "Zod environment validation", "Helmet + CORS"]
        if opts.database is Database.MONGODB:
            features.append("MongoDB + Mongoose")
        elif opts.database is Database.POSTGRESQL:
            features.append("PostgreSQL + Prisma")
        if opts.authentication:
            features.append("JWT authentication")
        if opts.swagger:
            features.append("Swagger / OpenAPI docs")
        if opts.docker:
            features.append("Docker + Docker Compose")
        if opts.github_actions:
            features.append("GitHub Actions CI")

        sections = [
            structure_section(express.structure_tree(self.name, opts)),
            ReadmeSection(
                title="Setup",
                body=express.setup_instructions(opts, self.config.package_manager),
            ),
            ReadmeSection(title="API endpoints", body=express.endpoints(opts)),
        ]
        if opts.swagger:
            sections.append(ReadmeSection(title="API documentation", body=express.API_DOCS))
        if opts.authentication:
            sections.append(ReadmeSection(title="Authentication", body=express.AUTH_EXAMPLES))

        return ReadmeOptions(
            project_name=self.name,
            description="REST API built with Express and TypeScript.",
            features=features,
            package_manager=self.config.package_manager,
            commands=command_table(
                Framework.EXPRESS, include_database=opts.database is Database.POSTGRESQL
            ),
            sections=sections,
        )

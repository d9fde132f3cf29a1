"""Tests for ``.env.local`` generation."""

from __future__ import annotations

from pathlib import Path

import pytest

from create_mvp_app.config import EnvVars
from create_mvp_app.generators import EnvFileGenerator
from create_mvp_app.generators.env_file import ENV_FILE

pytestmark = pytest.mark.unit

BASE_PLACEHOLDERS = """\
# Clerk Auth Keys (Get from: https://dashboard.clerk.com)
NEXT_PUBLIC_CLERK_PUBLISHABLE_KEY=pk_test_...
CLERK_SECRET_KEY=sk_test_...

# Supabase Keys (Get from: https://supabase.com/dashboard)
NEXT_PUBLIC_SUPABASE_URL=https://your-project.supabase.co
NEXT_PUBLIC_SUPABASE_ANON_KEY=your-anon-key
"""


def _render(config) -> str:
    return EnvFileGenerator().render(config)[ENV_FILE]


def _keys(content: str) -> list[str]:
    return [
        line.split("=", 1)[0]
        for line in content.splitlines()
        if line and not line.startswith("#")
    ]


# ---------------------------------------------------------------------------
# Base keys
# ---------------------------------------------------------------------------


class TestBaseKeys:
    def test_placeholders_when_no_values(self, make_config):
        assert _render(make_config()) == BASE_PLACEHOLDERS

    def test_keys_written_even_without_auth_or_db(self, make_config):
        content = _render(make_config(include_auth=False, include_db=False))
        assert content == BASE_PLACEHOLDERS

    def test_provided_values_used_verbatim(self, make_config):
        env = EnvVars(
            clerk_publishable_key="pk_live_123",
            clerk_secret_key="sk_live_456",
            supabase_url="https://abc.supabase.co",
            supabase_anon_key="eyJhbGciOi",
        )
        content = _render(make_config(env_vars=env))
        assert "NEXT_PUBLIC_CLERK_PUBLISHABLE_KEY=pk_live_123\n" in content
        assert "CLERK_SECRET_KEY=sk_live_456\n" in content
        assert "NEXT_PUBLIC_SUPABASE_URL=https://abc.supabase.co\n" in content
        assert "NEXT_PUBLIC_SUPABASE_ANON_KEY=eyJhbGciOi\n" in content

    def test_partial_values_fall_back_per_key(self, make_config):
        content = _render(make_config(env_vars=EnvVars(clerk_publishable_key="pk_live_1")))
        assert "NEXT_PUBLIC_CLERK_PUBLISHABLE_KEY=pk_live_1\n" in content
        assert "CLERK_SECRET_KEY=sk_test_...\n" in content


# ---------------------------------------------------------------------------
# Production blocks
# ---------------------------------------------------------------------------


class TestProductionBlocks:
    def test_caching_block(self, make_config):
        content = _render(make_config(include_caching=True))
        assert content == BASE_PLACEHOLDERS + (
            "\n"
            "# Upstash Redis (Get from: https://console.upstash.com)\n"
            "UPSTASH_REDIS_REST_URL=https://your-redis.upstash.io\n"
            "UPSTASH_REDIS_REST_TOKEN=your-redis-token\n"
        )

    def test_caching_uses_provided_values(self, make_config):
        env = EnvVars(upstash_redis_url="https://eu1.upstash.io", upstash_redis_token="tok")
        content = _render(make_config(include_caching=True, env_vars=env))
        assert "UPSTASH_REDIS_REST_URL=https://eu1.upstash.io\n" in content
        assert "UPSTASH_REDIS_REST_TOKEN=tok\n" in content

    def test_redis_values_ignored_without_caching(self, make_config):
        env = EnvVars(upstash_redis_url="https://eu1.upstash.io")
        assert "UPSTASH" not in _render(make_config(env_vars=env))

    def test_background_jobs_block(self, make_config):
        content = _render(make_config(include_background_jobs=True))
        assert "INNGEST_EVENT_KEY=your-inngest-event-key\n" in content
        assert "INNGEST_SIGNING_KEY=your-inngest-signing-key\n" in content

    def test_webhooks_block(self, make_config):
        assert "WEBHOOK_SECRET=your-webhook-secret\n" in _render(make_config(include_webhooks=True))

    @pytest.mark.parametrize(
        "flags",
        [
            {"include_feature_flags": True},
            {"include_ab_testing": True},
            {"include_feature_flags": True, "include_ab_testing": True},
        ],
    )
    def test_edge_config_written_once(self, make_config, flags):
        content = _render(make_config(**flags))
        assert content.count("EDGE_CONFIG=your-edge-config-id\n") == 1

    def test_monitoring_block(self, make_config):
        content = _render(make_config(include_monitoring=True))
        assert "SENTRY_DSN=https://your-sentry-dsn@sentry.io/project-id\n" in content

    def test_monitoring_uses_provided_dsn(self, make_config):
        env = EnvVars(sentry_dsn="https://key@o1.ingest.sentry.io/42")
        content = _render(make_config(include_monitoring=True, env_vars=env))
        assert "SENTRY_DSN=https://key@o1.ingest.sentry.io/42\n" in content

    @pytest.mark.parametrize("flag", ["include_multi_tenancy", "include_analytics"])
    def test_features_without_env_keys(self, make_config, flag):
        assert _render(make_config(**{flag: True})) == BASE_PLACEHOLDERS

    def test_all_blocks_in_flag_order(self, make_config):
        content = _render(
            make_config(
                include_caching=True,
                include_background_jobs=True,
                include_webhooks=True,
                include_feature_flags=True,
                include_monitoring=True,
            )
        )
        assert _keys(content) == [
            "NEXT_PUBLIC_CLERK_PUBLISHABLE_KEY",
            "CLERK_SECRET_KEY",
            "NEXT_PUBLIC_SUPABASE_URL",
            "NEXT_PUBLIC_SUPABASE_ANON_KEY",
            "UPSTASH_REDIS_REST_URL",
            "UPSTASH_REDIS_REST_TOKEN",
            "INNGEST_EVENT_KEY",
            "INNGEST_SIGNING_KEY",
            "WEBHOOK_SECRET",
            "EDGE_CONFIG",
            "SENTRY_DSN",
        ]
        assert "\n\n\n" not in content
        assert content.endswith("\n")
        assert not content.endswith("\n\n")


@pytest.mark.asyncio
async def test_generate_overwrites(make_config, tmp_path: Path):
    (tmp_path / ENV_FILE).write_text("STALE=1\n", encoding="utf-8")
    await EnvFileGenerator().generate(tmp_path, make_config())
    assert (tmp_path / ENV_FILE).read_text(encoding="utf-8") == BASE_PLACEHOLDERS

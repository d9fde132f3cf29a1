"""Landing page generation.

Replaces the scaffolded ``src/app/page.tsx`` with a page assembled from
installed Shadcn Blocks.  The only input is the brand label; it is emitted
once as the ``brandName`` constant that every section refers to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .base import FileGenerator
from .sections import Section, render_sections
from .templates import TemplateRenderer

LANDING_PAGE = "src/app/page.tsx"

REPO_URL = "https://github.com/riprayt/create-mvp-app"
LOGO_URL = "https://deifkwefumgah.cloudfront.net/shadcnblocks/block/block-1.svg"


@dataclass(frozen=True)
class LandingBlock:
    """A page section backed by one Shadcn Block component."""

    name: str
    component: str
    jsx: str
    anchor: Optional[str] = None


_NAVBAR = f"""\
<Navbar1
  logo={{{{
    url: "/",
    src: "{LOGO_URL}",
    alt: brandName,
    title: brandName,
  }}}}
  menu={{[
    {{
      title: "Features",
      url: "#features",
    }},
    {{
      title: "Components",
      url: "#components",
    }},
    {{
      title: "Tech Stack",
      url: "#tech-stack",
    }},
  ]}}
  auth={{{{
    login: {{
      title: "Documentation",
      url: "{REPO_URL}",
    }},
    signup: {{
      title: "Get Started",
      url: "#get-started",
    }},
  }}}}
/>"""

_HERO = f"""\
<Hero3
  badge="Built with Create MVP App 🚀"
  title={{`Welcome to ${{brandName}}`}}
  description="This project was created with create-mvp-app - a production-ready Next.js starter with authentication, database, 90+ UI components, and everything you need to ship your MVP in minutes."
  primaryAction={{{{
    text: "Start Building",
    url: "#features",
  }}}}
  secondaryAction={{{{
    text: "View on GitHub",
    url: "{REPO_URL}",
  }}}}
/>"""

_FEATURES = """\
<Feature13
  heading="Everything Included Out of the Box"
  subheading="What's Inside"
  description="Your project comes pre-configured with all the essentials for building a modern web application. No setup required - just start coding!"
/>"""

_COMPONENTS = """\
<Feature72
  badge="90+ Components"
  heading="Beautiful UI Components Ready to Use"
  description="This landing page is built with Shadcn Blocks - production-ready components you can customize. Check out Navbar, Hero, Features, Testimonials, CTA, and Footer components above and below."
/>"""

_TECH_STACK = """\
<Feature51
  heading="Modern Tech Stack"
  subheading="Technology"
  description="Built with the latest and greatest tools for web development."
/>"""

_TESTIMONIALS = """\
<Testimonial10
  heading="What This Template Gives You"
  subheading="Features"
  description="Real developers shipping faster with production-ready infrastructure"
/>"""

_CTA = f"""\
<Cta11
  heading="Ready to Build Your MVP?"
  description={{`Start customizing ${{brandName}} and ship your product faster. All components are fully customizable and production-ready.`}}
  primaryAction={{{{
    text: "Read the Docs",
    url: "{REPO_URL}",
  }}}}
  secondaryAction={{{{
    text: "Explore Components",
    url: "#components",
  }}}}
/>"""

_FOOTER = f"""\
<Footer2
  logo={{{{
    url: "/",
    src: "{LOGO_URL}",
    alt: brandName,
    title: brandName,
  }}}}
  tagline="Created with create-mvp-app - Ship your MVP in minutes, not weeks."
  menuItems={{[
    {{
      title: "Get Started",
      links: [
        {{ text: "Documentation", url: "{REPO_URL}" }},
        {{ text: "Features", url: "#features" }},
        {{ text: "Components", url: "#components" }},
      ],
    }},
    {{
      title: "Resources",
      links: [
        {{ text: "Next.js Docs", url: "https://nextjs.org/docs" }},
        {{ text: "Shadcn UI", url: "https://ui.shadcn.com" }},
        {{ text: "Tailwind CSS", url: "https://tailwindcss.com" }},
      ],
    }},
    {{
      title: "Tools Included",
      links: [
        {{ text: "Clerk Auth", url: "https://clerk.com" }},
        {{ text: "Supabase", url: "https://supabase.com" }},
        {{ text: "Vercel", url: "https://vercel.com" }},
      ],
    }},
  ]}}
  copyright={{`© ${{new Date().getFullYear()}} ${{brandName}}. Created with create-mvp-app.`}}
  bottomLinks={{[
    {{ text: "GitHub", url: "{REPO_URL}" }},
    {{ text: "Report Issue", url: "{REPO_URL}/issues" }},
  ]}}
/>"""

LANDING_BLOCKS: tuple[LandingBlock, ...] = (
    LandingBlock("navigation", "navbar1", _NAVBAR),
    LandingBlock("hero", "hero3", _HERO),
    LandingBlock("features", "feature13", _FEATURES, anchor="features"),
    LandingBlock("components", "feature72", _COMPONENTS, anchor="components"),
    LandingBlock("tech-stack", "feature51", _TECH_STACK, anchor="tech-stack"),
    LandingBlock("testimonials", "testimonial10", _TESTIMONIALS, anchor="testimonials"),
    LandingBlock("call-to-action", "cta11", _CTA),
    LandingBlock("footer", "footer2", _FOOTER),
)


class LandingPageGenerator(FileGenerator):
    """Writes ``src/app/page.tsx`` for a brand label."""

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        blocks: tuple[LandingBlock, ...] = LANDING_BLOCKS,
    ) -> None:
        super().__init__(renderer)
        self.blocks = blocks
        self.sections = [Section(block.name, self._block_content(block)) for block in blocks]

    def _block_content(self, block: LandingBlock):
        def content(_brand_name: str) -> str:
            rendered = self.renderer.render(
                "landing/section.tsx.j2", {"anchor": block.anchor, "jsx": block.jsx}
            )
            return rendered.rstrip("\n")

        return content

    def render(self, subject: str) -> dict[str, str]:
        page = self.renderer.render(
            "landing/page.tsx.j2",
            {
                "brand_name": subject,
                "components": [block.component for block in self.blocks],
                "body": render_sections(self.sections, subject, separator="\n\n"),
            },
        )
        return {LANDING_PAGE: page}

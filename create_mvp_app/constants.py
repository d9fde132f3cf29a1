"""Package lists and catalogues handed to the external installers."""

from __future__ import annotations

# Runtime dependencies installed into every project.
BASE_DEPENDENCIES: tuple[str, ...] = (
    "lucide-react",
    "zod",
    "sonner",
    "next-themes",
    "react-hook-form",
    "@hookform/resolvers",
)

DEV_DEPENDENCIES: tuple[str, ...] = (
    "@testing-library/react",
    "@testing-library/jest-dom",
    "@vitejs/plugin-react",
    "vitest",
    "@playwright/test",
    "prettier",
    "eslint-config-prettier",
    "husky",
    "lint-staged",
)

# Shadcn Blocks installed (in this order) when the blocks feature is selected.
SHADCN_BLOCKS: tuple[str, ...] = (
    "about3", "address-book1", "awards1", "background-pattern1", "banner1",
    "blog7", "blogpost1", "book-a-demo1", "careers4", "case-studies2",
    "case-study8", "changelog1", "checkout1", "code-example1", "community1",
    "compare-products1", "compare7", "compliance1", "contact7", "content1",
    "cta10", "cta11", "download2", "ecommerce-footer1", "experience1",
    "experience5", "faq1", "feature1", "feature13", "feature166",
    "feature17", "feature197", "feature2", "feature43", "feature51",
    "feature72", "feature73", "footer2", "gallery6", "help1",
    "hero1", "hero115", "hero3", "hero45", "hero47",
    "hero7", "incentives1", "industries1", "integration3", "list2",
    "live-purchase1", "login1", "logos8", "navbar1", "offer-modal4",
    "order-summary1", "payment-methods1", "pricing2", "pricing4", "pricing6",
    "process1", "product-card1", "product-categories1", "product-detail1", "product-gallery1",
    "product-list1", "product-quick-view4", "product-specs1", "project1", "promo-banner1",
    "rate-card2", "resource1", "reviews1", "service1", "services4",
    "shader3", "shopping-cart1", "signup1", "stats8", "team1",
    "testimonial10", "timeline9", "trust-strip1", "waitlist1", "wishlist1",
)

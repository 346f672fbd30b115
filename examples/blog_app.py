"""
Exemple d'intégration FastAPI — blog statique, fil d'actualité revalidé, profil SSR.
Lancer avec : uvicorn examples.blog_app:app --reload
"""
from fastapi import FastAPI
from pydantic import BaseModel

from page_strategies import PageDescriptor, PageRouter, configure_logging, router

configure_logging()

POSTS = {
    "bonjour": "Premier article",
    "strategies": "SSG, SSR, ISR : quelle stratégie pour quelle page ?",
}


class Post(BaseModel):
    slug: str
    title: str


def render_post(props):
    if props is None:
        return "<h1>Blog</h1>"
    return f"<article><h1>{props.title}</h1></article>"


def load_post(path: str) -> Post:
    slug = path.rsplit("/", 1)[-1]
    return Post(slug=slug, title=POSTS.get(slug, f"Brouillon : {slug}"))


pages = PageRouter()

# Page d'accueil : aucune capacité → pré-rendue au build, sans props
pages.add_page(PageDescriptor.new("/").with_template(lambda props: "<h1>Accueil</h1>"))

# Articles : énumérés au build, nouveaux slugs rendus à la première requête
pages.add_page(
    PageDescriptor[Post].new("/blog")
    .with_build_paths(lambda: [f"/blog/{slug}" for slug in POSTS])
    .with_build_state(load_post)
    .with_incremental(True)
    .with_template(render_post)
)

# Fil : reconstruit au plus une fois par heure
pages.add_page(
    PageDescriptor[Post].new("/news")
    .with_build_state(lambda path: Post(slug="news", title=f"{len(POSTS)} article(s)"))
    .with_revalidate_after("1h")
    .with_template(render_post)
)

# Profil : rendu à chaque requête
pages.add_page(
    PageDescriptor[Post].new("/me")
    .with_request_state(lambda path: Post(slug="me", title="Mon profil"))
    .with_template(render_post)
)

app = FastAPI(title="page_strategies — exemple blog")
app.include_router(router)
pages.build()
pages.register(app)


if __name__ == "__main__":
    import uvicorn
    print("🚀 Serveur FastAPI démarré")
    print("   → http://127.0.0.1:8000")
    print("   → http://127.0.0.1:8000/page-strategies/catalog")
    uvicorn.run(app, host="127.0.0.1", port=8000)

import reflex as rx

config = rx.Config(
    app_name="market_console",
    plugins=[
        rx.plugins.TailwindV4Plugin(),
        rx.plugins.SitemapPlugin(),
    ],
)

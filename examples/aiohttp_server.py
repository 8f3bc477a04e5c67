"""Redirects users to Discord's authorization page requesting the ``identify``
scope, then exchanges the returned code for an access token.

Requires ``DISCORD_CLIENT_ID``, ``DISCORD_CLIENT_SECRET`` and
``DISCORD_REDIRECT_URI`` (e.g. ``http://localhost:8080/callback``, registered in
your application's settings), either exported or in a ``.env`` file.
"""

import secrets

from aiohttp import ClientSession, web

from cordauth import HTTPException, OAuth2Client, OAuth2Config, Scope

routes = web.RouteTableDef()


@routes.get("/")
async def redirect(request: web.Request) -> web.Response:
    state = secrets.token_urlsafe(16)
    request.app["states"].add(state)
    raise web.HTTPFound(request.app["oauth"].authorize_url([Scope.identify], state=state))


@routes.get("/callback")
async def callback(request: web.Request) -> web.Response:
    state = request.query.get("state")
    if state not in request.app["states"]:
        raise web.HTTPBadRequest(text="state mismatch")
    request.app["states"].discard(state)

    try:
        token = await request.app["oauth"].exchange_code(request.query["code"])
    except HTTPException as e:
        return web.Response(status=e.status, text=str(e))

    return web.Response(text=f"The user's access token is: {token.access_token}")


async def setup(app: web.Application):
    session = ClientSession()
    app["states"] = set()
    app["oauth"] = OAuth2Client(session, OAuth2Config.from_env())
    yield
    await session.close()


app = web.Application()
app.add_routes(routes)
app.cleanup_ctx.append(setup)

web.run_app(app, port=8080)

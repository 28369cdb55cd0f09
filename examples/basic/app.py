"""Basic — a small route table mounted under a sub-directory.

Demonstrates method sets, typed blocks, choice blocks, named routes,
and reverse routing with a base path.

Run:
    python app.py GET /examples/basic/users/5
    wren routes app:router
"""

import sys

from wren import Router

router = Router(base_path="/examples/basic")
router.map("GET|POST", "/", "home#index", "home")
router.get("/users/", {"c": "UserController", "a": "ListAction"})
router.get("/users/[i:id]", "users#show", "users_show")
router.post("/users/[i:id]/[delete|update:action]", "usersController#doAction", "users_do")


def describe(method: str, path: str) -> str:
    match = router.match(path, method)
    if match is None:
        return f"{method} {path}: no route"
    lines = [f"{method} {path}", f"  target: {match.target!r}", f"  name:   {match.name}"]
    lines.extend(f"  {key}: {value}" for key, value in match.params.items())
    return "\n".join(lines)


if __name__ == "__main__":
    if len(sys.argv) == 3:
        print(describe(sys.argv[1], sys.argv[2]))
    else:
        print("Try these requests:")
        print("  GET ", router.generate("home"))
        print("  GET ", router.generate("users_show", {"id": 5}))
        print("  POST", router.generate("users_do", {"id": 10, "action": "update"}))

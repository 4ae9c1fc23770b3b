"""Restaurant and dish API tests."""


def create_restaurant(client, headers, **overrides):
    payload = {"name": "Luigi's", "description": "Pasta place", "address": "1 Main St"}
    payload.update(overrides)
    response = client.post("/api/my/restaurants", headers=headers, json=payload)
    assert response.status_code == 201
    return response.json()["data"]


def create_dish(client, headers, restaurant_id, **overrides):
    payload = {"name": "Pasta", "price": 5.0}
    payload.update(overrides)
    response = client.post(
        f"/api/my/restaurants/{restaurant_id}/dishes", headers=headers, json=payload
    )
    assert response.status_code == 201
    return response.json()["data"]


def test_create_restaurant(client, auth_headers):
    data = create_restaurant(client, auth_headers)
    assert data["name"] == "Luigi's"
    assert data["owner_id"] == auth_headers.user_id
    assert data["created_at"]


def test_create_restaurant_defaults_and_validation(client, auth_headers):
    response = client.post("/api/my/restaurants", headers=auth_headers, json={"name": "Bare"})
    assert response.status_code == 201
    assert response.json()["data"]["description"] == ""
    assert response.json()["data"]["address"] == ""

    response = client.post("/api/my/restaurants", headers=auth_headers, json={"address": "x"})
    assert response.status_code == 400


def test_create_restaurant_requires_auth(client):
    response = client.post("/api/my/restaurants", json={"name": "Nope"})
    assert response.status_code == 401


def test_public_listing_and_detail(client, auth_headers):
    """Anyone can browse restaurants and their menus."""
    restaurant = create_restaurant(client, auth_headers)
    rid = restaurant["id"]
    create_dish(client, auth_headers, rid, name="Tiramisu", price=6, category="Dessert")
    create_dish(client, auth_headers, rid, name="Bruschetta", price=4.5, category="A")
    create_dish(client, auth_headers, rid, name="Lasagne", price=9.25)

    response = client.get("/api/restaurants")
    assert response.status_code == 200
    assert [r["id"] for r in response.json()["data"]] == [restaurant["id"]]

    response = client.get(f"/api/restaurants/{restaurant['id']}")
    assert response.status_code == 200
    detail = response.json()["data"]
    assert detail["name"] == "Luigi's"
    assert [d["name"] for d in detail["dishes"]] == ["Bruschetta", "Tiramisu", "Lasagne"]
    lasagne = detail["dishes"][2]
    assert lasagne["category"] == "Main"
    assert lasagne["price"] == 9.25
    assert lasagne["available"] is True


def test_restaurant_detail_not_found(client):
    response = client.get("/api/restaurants/999999")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Restaurant not found"}


def test_my_restaurants_only_lists_own(client, auth_headers, other_auth_headers):
    mine = create_restaurant(client, auth_headers, name="Mine")
    create_restaurant(client, other_auth_headers, name="Theirs")

    response = client.get("/api/my/restaurants", headers=auth_headers)
    assert response.status_code == 200
    assert [r["id"] for r in response.json()["data"]] == [mine["id"]]


def test_update_restaurant_partial(client, auth_headers):
    restaurant = create_restaurant(client, auth_headers)
    response = client.put(
        f"/api/my/restaurants/{restaurant['id']}",
        headers=auth_headers,
        json={"address": "2 Side St"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["address"] == "2 Side St"
    assert data["name"] == "Luigi's"


def test_update_restaurant_not_owner(client, auth_headers, other_auth_headers):
    restaurant = create_restaurant(client, auth_headers)
    response = client.put(
        f"/api/my/restaurants/{restaurant['id']}",
        headers=other_auth_headers,
        json={"name": "Hijacked"},
    )
    assert response.status_code == 403
    assert response.json()["error"] == "Not authorized"

    response = client.put("/api/my/restaurants/999999", headers=auth_headers, json={"name": "X"})
    assert response.status_code == 404


def test_delete_restaurant_removes_dishes(client, auth_headers):
    restaurant = create_restaurant(client, auth_headers)
    create_dish(client, auth_headers, restaurant["id"])

    response = client.delete(f"/api/my/restaurants/{restaurant['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"] == {"deleted": True}

    assert client.get(f"/api/restaurants/{restaurant['id']}").status_code == 404


def test_delete_restaurant_with_orders_conflicts(client, auth_headers, other_auth_headers):
    restaurant = create_restaurant(client, auth_headers)
    dish = create_dish(client, auth_headers, restaurant["id"])
    client.post(
        "/api/orders",
        headers=other_auth_headers,
        json={"restaurant_id": restaurant["id"], "items": [{"dish_id": dish["id"], "quantity": 1}]},
    )

    response = client.delete(f"/api/my/restaurants/{restaurant['id']}", headers=auth_headers)
    assert response.status_code == 409


def test_dish_crud(client, auth_headers):
    restaurant = create_restaurant(client, auth_headers)
    dish = create_dish(client, auth_headers, restaurant["id"], description="Fresh")
    assert dish["restaurant_id"] == restaurant["id"]
    assert dish["category"] == "Main"
    assert dish["available"] is True

    response = client.put(
        f"/api/my/restaurants/{restaurant['id']}/dishes/{dish['id']}",
        headers=auth_headers,
        json={"available": False, "price": 6.75},
    )
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["available"] is False
    assert updated["price"] == 6.75
    assert updated["name"] == "Pasta"

    response = client.delete(
        f"/api/my/restaurants/{restaurant['id']}/dishes/{dish['id']}", headers=auth_headers
    )
    assert response.status_code == 200
    assert client.get(f"/api/restaurants/{restaurant['id']}").json()["data"]["dishes"] == []


def test_dish_validation(client, auth_headers):
    restaurant = create_restaurant(client, auth_headers)
    url = f"/api/my/restaurants/{restaurant['id']}/dishes"

    assert client.post(url, headers=auth_headers, json={"name": "No price"}).status_code == 400
    assert client.post(url, headers=auth_headers, json={"price": 3}).status_code == 400
    response = client.post(url, headers=auth_headers, json={"name": "Neg", "price": -1})
    assert response.status_code == 400


def test_dish_owner_checks(client, auth_headers, other_auth_headers):
    restaurant = create_restaurant(client, auth_headers)
    dish = create_dish(client, auth_headers, restaurant["id"])

    response = client.post(
        f"/api/my/restaurants/{restaurant['id']}/dishes",
        headers=other_auth_headers,
        json={"name": "Intruder", "price": 1},
    )
    assert response.status_code == 403

    response = client.put(
        f"/api/my/restaurants/{restaurant['id']}/dishes/{dish['id']}",
        headers=other_auth_headers,
        json={"price": 0},
    )
    assert response.status_code == 403

    response = client.put(
        f"/api/my/restaurants/{restaurant['id']}/dishes/999999",
        headers=auth_headers,
        json={"price": 0},
    )
    assert response.status_code == 404


def test_dish_price_beyond_column_range(client, auth_headers):
    restaurant = create_restaurant(client, auth_headers)
    url = f"/api/my/restaurants/{restaurant['id']}/dishes"

    response = client.post(url, headers=auth_headers, json={"name": "Gold", "price": 1e9})
    assert response.status_code == 400

    dish = create_dish(client, auth_headers, restaurant["id"], price=99_999_999.99)
    response = client.put(f"{url}/{dish['id']}", headers=auth_headers, json={"price": 1e12})
    assert response.status_code == 400

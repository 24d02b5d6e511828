from models import PRODUCT_CATEGORIES

rating = {
    "type": "object",
    "required": ["rate", "count"],
    "properties": {
        "rate": {
            "type": "number"
        },
        "count": {
            "type": "integer"
        }
    }
}

product = {
    "type": "object",
    "required": ["id", "title", "price", "description", "category", "image"],
    "properties": {
        "id": {
            "type": "integer"
        },
        "title": {
            "type": "string"
        },
        "price": {
            "type": "number"
        },
        "description": {
            "type": "string"
        },
        "category": {
            "type": "string"
        },
        "image": {
            "type": "string"
        },
        "rating": rating,
    }
}

create_product = {
    "type": "object",
    "required": ["title", "price", "description", "image", "category"],
    "properties": {
        "title": {
            "type": "string",
            "minLength": 1
        },
        "price": {
            "type": "number",
            "minimum": 0
        },
        "description": {
            "type": "string"
        },
        "image": {
            "type": "string"
        },
        "category": {
            "type": "string",
            "enum": PRODUCT_CATEGORIES
        },
    }
}

categories = {
    "type": "array",
    "minItems": 1,
    "items": {
        "type": "string"
    }
}

cart_product = {
    "type": "object",
    "required": ["productId", "quantity"],
    "properties": {
        "productId": {
            "type": "integer",
            "minimum": 1
        },
        "quantity": {
            "type": "integer",
            "minimum": 1
        }
    }
}

cart = {
    "type": "object",
    "required": ["id", "userId", "date", "products"],
    "properties": {
        "id": {
            "type": "integer"
        },
        "userId": {
            "type": "integer"
        },
        "date": {
            "type": "string"
        },
        "products": {
            "type": "array",
            "items": cart_product
        },
        "__v": {
            "type": "integer"
        }
    }
}

create_cart = {
    "type": "object",
    "required": ["userId", "date", "products"],
    "properties": {
        "userId": {
            "type": "integer",
            "minimum": 1
        },
        "date": {
            "type": "string"
        },
        "products": {
            "type": "array",
            "minItems": 1,
            "items": cart_product
        }
    }
}

geolocation = {
    "type": "object",
    "required": ["lat", "long"],
    "properties": {
        "lat": {
            "type": "string"
        },
        "long": {
            "type": "string"
        }
    }
}

address = {
    "type": "object",
    "required": ["city", "street", "number", "zipcode", "geolocation"],
    "properties": {
        "city": {
            "type": "string"
        },
        "street": {
            "type": "string"
        },
        "number": {
            "type": "integer"
        },
        "zipcode": {
            "type": "string"
        },
        "geolocation": geolocation,
    }
}

name = {
    "type": "object",
    "required": ["firstname", "lastname"],
    "properties": {
        "firstname": {
            "type": "string"
        },
        "lastname": {
            "type": "string"
        }
    }
}

create_user = {
    "type": "object",
    "required": ["email", "username", "password", "name", "address", "phone"],
    "properties": {
        "email": {
            "type": "string"
        },
        "username": {
            "type": "string"
        },
        "password": {
            "type": "string"
        },
        "name": name,
        "address": address,
        "phone": {
            "type": "string"
        },
    }
}

user = {
    "type": "object",
    "required": ["id", "email", "username", "password", "name", "address", "phone"],
    "properties": {
        "id": {
            "type": "integer"
        },
        **create_user["properties"],
    }
}

auth_token = {
    "type": "object",
    "required": ["token"],
    "properties": {
        "token": {
            "type": "string",
            "minLength": 1
        }
    }
}

_BREEDS = [
    ("Мурзик", "Британская короткошерстная", 2, 15000),
    ("Барсик", "Мейн-кун", 1, 35000),
    ("Снежок", "Турецкая ангора", 3, 18000),
    ("Луна", "Русская голубая", 2, 22000),
    ("Симба", "Абиссинская", 1, 28000),
    ("Багира", "Бомбейская", 4, 20000),
    ("Персик", "Персидская", 2, 25000),
    ("Тигра", "Бенгальская", 1, 45000),
    ("Соня", "Шотландская вислоухая", 3, 19000),
    ("Рыжик", "Сибирская", 2, 12000),
    ("Дымка", "Невская маскарадная", 1, 21000),
    ("Феликс", "Сфинкс", 2, 30000),
]

ALL_CATS: list[dict] = [
    {
        "id": index,
        "name": name,
        "breed": breed,
        "age": age,
        "price": price,
        "image": f"/images/cat-{index}.jpg",
    }
    for index, (name, breed, age, price) in enumerate(_BREEDS * 2, start=1)
]

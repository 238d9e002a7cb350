"""
Reference people used by the scripted conversations.
"""
from typing import List

from models.results import SearchResult

FIELDS = (
    "id", "name", "age", "gender", "marital_status", "location",
    "rating", "references", "companies", "contacts", "image",
)

# Rows grouped by the script family they belong to
JOHN_CARUSO_ROWS = [
    ("a1b2c3d4-e5f6-4a5b-8c9d-0e1f2a3b4c5d", "John Caruso 1", 28, "Male", "Single", "California", 4.2, 23, 3, 18,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/jc1.webp"),
    ("b2c3d4e5-f6a7-4b6c-9d0e-1f2a3b4c5d6e", "John Caruso 2", 34, "Male", "Married", "California", 4.5, 31, 2, 22,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/jc2.jpg"),
    ("c3d4e5f6-a7b8-4c7d-0e1f-2a3b4c5d6e7f", "John Caruso 3", 31, "Male", "Single", "New York", 3.8, 18, 4, 14,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/jc3.jpg"),
    ("d4e5f6a7-b8c9-4d8e-1f2a-3b4c5d6e7f8a", "John Caruso 4", 42, "Male", "Divorced", "California", 4.7, 45, 5, 28,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/jc4.webp"),
    ("e5f6a7b8-c9d0-4e9f-2a3b-4c5d6e7f8a9b", "John Caruso 5", 29, "Male", "Single", "Texas", 4.0, 20, 3, 16,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/jc5.jpg"),
    ("f6a7b8c9-d0e1-4f0a-3b4c-5d6e7f8a9b0c", "John Caruso 6", 37, "Male", "Married", "Florida", 4.4, 33, 6, 24,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/jc6.jpeg"),
    ("a7b8c9d0-e1f2-4a1b-4c5d-6e7f8a9b0c1d", "John Caruso 7", 25, "Male", "Single", "Illinois", 3.9, 16, 2, 12,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/jc7.jpg"),
    ("b8c9d0e1-f2a3-4b2c-5d6e-7f8a9b0c1d2e", "John Caruso 8", 33, "Male", "Married", "Pennsylvania", 4.3, 28, 4, 20,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/jc8.jpg"),
]

VON_MILLER_ROWS = [
    ("c9d0e1f2-a3b4-4c5d-6e7f-8a9b0c1d2e3f", "Von Miller 1", 33, "Male", "Single", "Virginia", 4.6, 28, 4, 19,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/vm1.jpeg"),
    ("d0e1f2a3-b4c5-4d6e-7f8a-9b0c1d2e3f4a", "Von Miller 2", 29, "Male", "Married", "Virginia", 4.3, 35, 3, 24,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/vm2.jpg"),
    ("e1f2a3b4-c5d6-4e7f-8a9b-0c1d2e3f4a5b", "Von Miller 3", 31, "Male", "Single", "Texas", 4.0, 22, 5, 16,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/vm3.jpg"),
    ("f2a3b4c5-d6e7-4f8a-9b0c-1d2e3f4a5b6c", "Von Miller 4", 36, "Male", "Divorced", "Virginia", 4.8, 41, 6, 31,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/vm4.jpg"),
    ("a3b4c5d6-e7f8-4a9b-0c1d-2e3f4a5b6c7d", "Von Miller 5", 27, "Male", "Single", "Ohio", 3.7, 19, 3, 13,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/vm5.jpg"),
    ("b4c5d6e7-f8a9-4b0c-1d2e-3f4a5b6c7d8e", "Von Miller 6", 40, "Male", "Married", "Georgia", 4.5, 37, 7, 27,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/vm6.webp"),
    ("c5d6e7f8-a9b0-4c1d-2e3f-4a5b6c7d8e9f", "Von Miller 7", 32, "Male", "Single", "Michigan", 4.1, 25, 4, 18,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/vm7.webp"),
    ("d6e7f8a9-b0c1-4d2e-3f4a-5b6c7d8e9f0a", "Von Miller 8", 35, "Male", "Married", "Virginia", 4.7, 43, 5, 29,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/vm8.jpg"),
]

ROBERT_SCHMIDT_ROWS = [
    ("e5f6a7b8-c9d0-4e1f-2a3b-4c5d6e7f8a9b", "Robert Schmidt 1", 32, "Male", "Single", "New York", 4.4, 25, 3, 18,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/i1.png"),
    ("f6a7b8c9-d0e1-4f2a-3b4c-5d6e7f8a9b0c", "Robert Schmidt 2", 28, "Male", "Married", "California", 4.2, 32, 2, 21,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/i2.png"),
    ("a7b8c9d0-e1f2-4a3b-4c5d-6e7f8a9b0c1d", "Robert Schmidt 3", 35, "Male", "Single", "Texas", 3.9, 19, 4, 14,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/i3.png"),
    ("b8c9d0e1-f2a3-4b4c-5d6e-7f8a9b0c1d2e", "Robert Schmidt 4", 41, "Male", "Divorced", "Florida", 4.6, 38, 5, 27,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/i4.png"),
    ("c9d0e1f2-a3b4-4c5d-6e7f-8a9b0c1d2e3a", "Robert Schmidt 5", 30, "Male", "Single", "Illinois", 4.0, 22, 3, 16,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/i5.png"),
    ("d0e1f2a3-b4c5-4d6e-7f8a-9b0c1d2e3f4b", "Robert Schmidt 6", 37, "Male", "Married", "Pennsylvania", 4.3, 33, 6, 24,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/i6.png"),
    ("e1f2a3b4-c5d6-4e7f-8a9b-0c1d2e3f4a5c", "Robert Schmidt 7", 26, "Male", "Single", "Ohio", 3.8, 17, 2, 12,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/i7.png"),
    ("f2a3b4c5-d6e7-4f8a-9b0c-1d2e3f4a5b6d", "Robert Schmidt 8", 34, "Male", "Married", "Georgia", 4.1, 29, 4, 19,
     "https://raw.githubusercontent.com/imcnaney/donkey/main/img/profile.png"),
]

EXAMPLE_PERSON_ROWS = [
    ("a3b4c5d6-e7f8-491a-0b1c-2d3e4f5a6b7c", "Example Person 1", 29, "Male", "Single", "California", 4.1, 24, 3, 17,
     "https://picsum.photos/240/240?random=501"),
    ("b4c5d6e7-f8a9-4a2b-1c2d-3e4f5a6b7c8d", "Example Person 2", 35, "Male", "Married", "New York", 4.3, 31, 4, 22,
     "https://picsum.photos/240/240?random=502"),
    ("c5d6e7f8-a9b0-4b3c-2d3e-4f5a6b7c8d9e", "Example Person 3", 27, "Male", "Single", "Texas", 3.9, 18, 2, 13,
     "https://picsum.photos/240/240?random=503"),
    ("d6e7f8a9-b0c1-4c4d-3e4f-5a6b7c8d9e0f", "Example Person 4", 42, "Male", "Divorced", "Florida", 4.5, 36, 5, 26,
     "https://picsum.photos/240/240?random=504"),
    ("e7f8a9b0-c1d2-4d5e-4f5a-6b7c8d9e0f1a", "Example Person 5", 31, "Male", "Single", "Illinois", 4.0, 21, 3, 15,
     "https://picsum.photos/240/240?random=505"),
    ("f8a9b0c1-d2e3-4e6f-5a6b-7c8d9e0f1a2b", "Example Person 6", 38, "Male", "Married", "Pennsylvania", 4.4, 34, 6, 25,
     "https://picsum.photos/240/240?random=506"),
    ("a9b0c1d2-e3f4-4f7a-6b7c-8d9e0f1a2b3c", "Example Person 7", 25, "Male", "Single", "Ohio", 3.7, 16, 2, 11,
     "https://picsum.photos/240/240?random=507"),
    ("b0c1d2e3-f4a5-4a8b-7c8d-9e0f1a2b3c4d", "Example Person 8", 33, "Male", "Married", "Georgia", 4.2, 28, 4, 20,
     "https://picsum.photos/240/240?random=508"),
]

def _build(rows) -> List[SearchResult]:
    return [SearchResult(**dict(zip(FIELDS, row))) for row in rows]

JOHN_CARUSO = _build(JOHN_CARUSO_ROWS)
VON_MILLER = _build(VON_MILLER_ROWS)
ROBERT_SCHMIDT = _build(ROBERT_SCHMIDT_ROWS)
EXAMPLE_PEOPLE = _build(EXAMPLE_PERSON_ROWS)


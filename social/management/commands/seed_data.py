DEFAULT_PASSWORD = "password123"

user_fixtures = [
    {
        "name": "Sarah Johnson",
        "email": "sarah@test.com",
        "avatar": "https://i.pravatar.cc/200?img=1",
        "bio": "Designer & Creative\nNew York\nMaking the world beautiful",
    },
    {
        "name": "Mike Chen",
        "email": "mike@test.com",
        "avatar": "https://i.pravatar.cc/200?img=2",
        "bio": "Full Stack Developer\nGamer\nCoffee addict",
    },
    {
        "name": "Emma Wilson",
        "email": "emma@test.com",
        "avatar": "https://i.pravatar.cc/200?img=3",
        "bio": "Book lover\nTravel enthusiast\nFoodie",
    },
    {
        "name": "Alex Rivera",
        "email": "alex@test.com",
        "avatar": "https://i.pravatar.cc/200?img=4",
        "bio": "Fitness freak\nMusic lover\nDog dad",
    },
    {
        "name": "Jessica Lee",
        "email": "jessica@test.com",
        "avatar": "https://i.pravatar.cc/200?img=5",
        "bio": "Tech enthusiast\nMovie buff\nNature lover",
    },
    {
        "name": "David Kim",
        "email": "david@test.com",
        "avatar": "https://i.pravatar.cc/200?img=6",
        "bio": "Entrepreneur\nBusiness minded\nWorld traveler",
    },
    {
        "name": "Olivia Brown",
        "email": "olivia@test.com",
        "avatar": "https://i.pravatar.cc/200?img=7",
        "bio": "Singer & Songwriter\nPiano player\nDreamer",
    },
    {
        "name": "James Wilson",
        "email": "james@test.com",
        "avatar": "https://i.pravatar.cc/200?img=8",
        "bio": "Photographer\nAdventure seeker\nArt lover",
    },
]

post_image_pool = [
    "https://picsum.photos/seed/social1/800/600",
    "https://picsum.photos/seed/social2/800/600",
    "https://picsum.photos/seed/social3/800/600",
    "https://picsum.photos/seed/social4/800/600",
    "https://picsum.photos/seed/social5/800/600",
]

comment_phrases = [
    "Love this!",
    "So true",
    "Great shot",
    "Where was this?",
    "Made my day",
    "Can't wait to see more",
]

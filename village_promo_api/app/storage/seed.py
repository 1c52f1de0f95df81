"""Sample village data loaded into an empty store on first start."""

_MAPS_YAYUK = (
    "https://www.google.com/maps/embed?pb=!1m18!1m12!1m3!1d{zoom}!2d112.65279798679201"
    "!3d-7.152348076278058!2m3!1f0!2f0!3f0!3m2!1i1024!2i768!4f13.1!3m3!1m2"
    "!1s0x2dd8010066bd5589%3A0x36be09024c3b982a!2sYayuk%20Collection%20%26%20Accessories"
    "!5e0!3m2!1sen!2sid!4v1747374768900!5m2!1sen!2sid"
)
_MAPS_YARIS = (
    "https://www.google.com/maps/embed?pb=!1m18!1m12!1m3!1d{zoom}!2d112.6511758383209"
    "!3d-7.151240098213269!2m3!1f0!2f0!3f0!3m2!1i1024!2i768!4f13.1!3m3!1m2"
    "!1s0x2dd8010029cc181d%3A0xfc35848efc1e52e7!2sSedia%20Kue%20Kering%20(Yaris%20Cookies)"
    "!5e0!3m2!1sid!2sid!4v1747185507203!5m2!1sid!2sid"
)
_MAPS_VILLAGE = (
    "https://www.google.com/maps/embed?pb=!1m18!1m12!1m3!1d{zoom}!2d112.65176368664429"
    "!3d-7.152391898289468!2m3!1f0!2f0!3f0!3m2!1i1024!2i768!4f13.1!3m3!1m2"
    "!1s0x2dd8018bea2f0c1f%3A0xd69264df8de74401!2sKelurahan%20Sukodono"
    "!5e0!3m2!1sid!2sid!4v1747183100084!5m2!1sid!2sid"
)

SEED_PUBLISH_DATE = "2025-05-16"

CATEGORIES = [
    {"name": "Kerajinan", "slug": "kerajinan"},
    {"name": "Makanan", "slug": "makanan"},
    {"name": "Kedai", "slug": "kedai"},
    {"name": "Jasa", "slug": "jasa"},
]


def _umkm(**fields):
    record = {
        "description": "",
        "history": "",
        "current_condition": "Aktif",
        "image_url": "",
        "product_images": [],
        "location": "",
        "address": "",
        "promotion_text": "",
        "coordinates": "",
        "maps1": "",
        "maps2": "",
        "publish_date": SEED_PUBLISH_DATE,
        "reviews": [],
    }
    record.update(fields)
    return record


UMKMS = [
    _umkm(
        name="Yayuk Collection",
        description="Memproduksi berbagai kerajinan tangan berupa gelang manik (Crystal kaca) yang elegan dan menawan.",
        image_url="https://down-id.img.susercontent.com/file/id-11134207-7r98z-lnh14d40x6o1c6",
        location="Sindujoyo 21/51",
        address="Jl. Sindujoyo Gg. XXI No.50",
        category_id=1,
        coordinates="-7.152391,112.652379",
        maps1=_MAPS_YAYUK.format(zoom="1000.0"),
        maps2=_MAPS_YAYUK.format(zoom="300.0"),
    ),
    _umkm(
        name="Yaris Cookies",
        description="Menyajikan berbagai kue kering yang dibuat dari bahan-bahan lokal berkualitas.",
        image_url="https://2112snackdelight.com/wp-content/uploads/2020/11/products-image-nutella-cookies-04.jpg",
        location="Sindujoyo 13/08",
        address="Jl. Sindujoyo Gg. XIII No.08",
        category_id=2,
        coordinates="-7.151240,112.651175",
        maps1=_MAPS_YARIS.format(zoom="1000.0"),
        maps2=_MAPS_YARIS.format(zoom="300.0"),
    ),
    _umkm(
        name="Warung Kopi Mama Atul",
        description="Menyajikan berbagai minuman kemasan dan kopi khas dari gresik yang kental dan nikmat.",
        image_url="https://manual.co.id/wp-content/uploads/2021/11/manual_photo_essay_warkop_web-18-980x719.jpg",
        location="KH Hasyim Asyari",
        address="Jl. Kebun No. 8, Dusun Subur",
        category_id=3,
        promotion_text="Paket Hemat",
        coordinates="-6.397709,108.283611",
        maps1=_MAPS_VILLAGE.format(zoom="1979.3857754746075"),
        maps2=_MAPS_VILLAGE.format(zoom="300.0"),
    ),
    _umkm(
        name="Batik Alami Desa",
        description="Memproduksi kain batik dengan pewarna alami dari tumbuhan lokal dengan motif khas desa.",
        image_url="https://images.unsplash.com/photo-1528837516156-0f7b1dccb352",
        location="Dusun Indah",
        address="Jl. Seni No. 20, Dusun Indah",
        category_id=1,
        promotion_text="Diskon 15%",
        coordinates="-6.396709,108.285611",
        maps1=_MAPS_VILLAGE.format(zoom="1979.3857754746075"),
        maps2=_MAPS_VILLAGE.format(zoom="300.0"),
    ),
    _umkm(
        name="Kopi Desa Sejahtera",
        description="Menawarkan biji kopi lokal yang ditanam di ketinggian optimal dan diolah dengan metode tradisional.",
        image_url="https://images.unsplash.com/photo-1566478989037-eec170784d0b",
        location="Dusun Makmur",
        address="Jl. Pasar No. 15, Dusun Makmur",
        category_id=2,
        promotion_text="Gratis Sampel",
        coordinates="-6.400709,108.281611",
        maps1=_MAPS_VILLAGE.format(zoom="1979.3857754746075"),
        maps2=_MAPS_VILLAGE.format(zoom="300.0"),
    ),
    _umkm(
        name="Madu Hutan Asli",
        description="Menyediakan madu murni yang diambil langsung dari hutan desa dengan kualitas premium.",
        image_url="https://images.unsplash.com/photo-1587049352851-8d4e89133924",
        location="Dusun Hutan",
        address="Jl. Hutan No. 5, Dusun Hutan",
        category_id=3,
        promotion_text="Bundling 3",
        coordinates="-6.401709,108.280611",
        maps1=_MAPS_VILLAGE.format(zoom="1979.3857754746075"),
        maps2=_MAPS_VILLAGE.format(zoom="300.0"),
    ),
]

VILLAGE_PROFILE = {
    "name": "Kelurahan Sukodono",
    "description": "Pusat informasi digital untuk mempromosikan potensi desa dan mendukung UMKM lokal.",
    "history": (
        "Kelurahan Sukodono memiliki sejarah panjang sejak tahun 1945. Didirikan oleh para pejuang "
        "kemerdekaan, desa ini telah berkembang menjadi pusat ekonomi dan budaya di kawasan ini."
    ),
    "vision": (
        "Menjadikan Kelurahan Sukodono sebagai desa mandiri dan berkelanjutan melalui pemberdayaan "
        "ekonomi lokal dan pelestarian budaya."
    ),
    "mission": [
        "Meningkatkan taraf hidup masyarakat melalui pemberdayaan UMKM",
        "Mengembangkan potensi alam desa secara berkelanjutan",
        "Melestarikan kearifan lokal dan budaya desa",
        "Menciptakan lingkungan desa yang bersih dan sehat",
    ],
    "population": 1220,
    "umkm_count": 52,
    "hamlet_count": 8,
}

"""Sample rows for the in-memory demo store."""

CLIENTS = [
    {
        "id": "1",
        "company_name": "PT Contoh Perusahaan",
        "address": "Jl. Sudirman No. 123, Jakarta Pusat",
        "phone": "021-1234567",
        "email": "contact@contohperusahaan.com",
        "created_at": "2024-01-15T10:30:00+00:00",
    },
    {
        "id": "2",
        "company_name": "CV Maju Jaya",
        "address": "Jl. Gatot Subroto No. 456, Bandung",
        "phone": "022-7654321",
        "email": "info@majujaya.com",
        "created_at": "2024-01-14T09:00:00+00:00",
    },
    {
        "id": "3",
        "company_name": "PT Teknologi Nusantara",
        "address": "Jl. Pemuda No. 12, Surabaya",
        "phone": "031-5550101",
        "email": "halo@teknus.co.id",
        "created_at": "2024-01-13T08:15:00+00:00",
    },
    {
        "id": "4",
        "company_name": "PT Digital Solution",
        "address": "Jl. Diponegoro No. 8, Semarang",
        "phone": "024-8880022",
        "email": "sales@digitalsolution.id",
        "created_at": "2024-01-12T14:45:00+00:00",
    },
    {
        "id": "5",
        "company_name": "CV Berkah Sejahtera",
        "address": "Jl. Malioboro No. 77, Yogyakarta",
        "phone": "0274-512345",
        "email": "admin@berkahsejahtera.com",
        "created_at": "2024-01-10T11:20:00+00:00",
    },
]

CATALOG_ITEMS = [
    {
        "id": "1",
        "order_item_name": "Konsultasi IT",
        "order_item_type": "Service",
        "order_item_price": 500000,
        "created_at": "2024-01-15T10:00:00+00:00",
    },
    {
        "id": "2",
        "order_item_name": "Setup Server",
        "order_item_type": "Service",
        "order_item_price": 2000000,
        "created_at": "2024-01-14T10:00:00+00:00",
    },
    {
        "id": "3",
        "order_item_name": "Lisensi Antivirus (1 tahun)",
        "order_item_type": "Software",
        "order_item_price": 350000,
        "created_at": "2024-01-13T10:00:00+00:00",
    },
    {
        "id": "4",
        "order_item_name": "Router Gigabit",
        "order_item_type": "Hardware",
        "order_item_price": 1250000,
        "created_at": "2024-01-12T10:00:00+00:00",
    },
]

DOCUMENTS = [
    {
        "id": "1",
        "number": "INV-2024-001",
        "type": "invoice",
        "status": "paid",
        "client_name": "PT Contoh Perusahaan",
        "client_address": "Jl. Sudirman No. 123, Jakarta Pusat",
        "client_phone": "021-1234567",
        "client_email": "contact@contohperusahaan.com",
        "date": "2024-01-15",
        "due_date": "2024-02-15",
        "notes": "Pembayaran dapat dilakukan melalui transfer bank",
        "discount": 5,
        "tax": 11,
        "subtotal": 7000000,
        "grand_total": 7381500,
        "created_at": "2024-01-15T10:30:00+00:00",
    },
    {
        "id": "2",
        "number": "QUO-2024-001",
        "type": "quotation",
        "status": "pending",
        "client_name": "CV Maju Jaya",
        "client_address": "Jl. Gatot Subroto No. 456, Bandung",
        "client_phone": "022-7654321",
        "client_email": "info@majujaya.com",
        "date": "2024-01-14",
        "due_date": "2024-01-28",
        "notes": "Penawaran berlaku 30 hari",
        "discount": 0,
        "tax": 11,
        "subtotal": 2350000,
        "grand_total": 2608500,
        "created_at": "2024-01-14T09:30:00+00:00",
    },
]

DOCUMENT_ITEMS = [
    {"id": "1", "document_id": "1", "position": 0, "name": "Konsultasi IT", "quantity": 10, "price": 500000, "total": 5000000},
    {"id": "2", "document_id": "1", "position": 1, "name": "Setup Server", "quantity": 1, "price": 2000000, "total": 2000000},
    {"id": "3", "document_id": "2", "position": 0, "name": "Setup Server", "quantity": 1, "price": 2000000, "total": 2000000},
    {
        "id": "4",
        "document_id": "2",
        "position": 1,
        "name": "Lisensi Antivirus (1 tahun)",
        "quantity": 1,
        "price": 350000,
        "total": 350000,
    },
]

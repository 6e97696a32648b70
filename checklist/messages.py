# checklist/messages.py
"""
Every user-facing string on the summary page, as an (EN, ID) pair.

Resolve once per render with translator(locale) and call the result with a
message key. Unknown keys raise KeyError; an unknown locale falls back to EN.
"""

from collections import namedtuple

DEFAULT_LOCALE = "EN"

# Notice raised by a workflow for the page to show once.
# level: "success" | "error"
Notice = namedtuple("Notice", ["level", "key"])

MESSAGES = {
    # ── Page states ──────────────────────────────────────────────────────────
    "loading":            ("Loading your results...", "Loading your results..."),
    "load_failed":        ("Failed to load response data. Please try again.",
                           "Failed to load response data. Please try again."),
    "not_found":          ("Response not found", "Response not found"),
    "go_home":            ("Go Home", "Go Home"),
    "no_response_id":     ("No assessment selected. Open this page from your assessment link.",
                           "Tidak ada penilaian yang dipilih. Buka halaman ini dari tautan penilaian Anda."),

    # ── Header ───────────────────────────────────────────────────────────────
    "title":              ("Assessment Summary", "Ringkasan Penilaian"),
    "email_label":        ("Email:", "Email:"),
    "language_label":     ("Language:", "Bahasa:"),
    "language_name":      ("English", "Bahasa Indonesia"),
    "date_label":         ("Date:", "Tanggal:"),
    "download_pdf":       ("Download PDF", "Unduh PDF"),
    "downloading":        ("Downloading...", "Mengunduh..."),
    "new_assessment":     ("New Assessment", "Penilaian Baru"),

    # ── Results overview ─────────────────────────────────────────────────────
    "overview_title":     ("Results Overview", "Ikhtisar Hasil"),
    "yes":                ("Yes", "Ya"),
    "no":                 ("No", "Tidak"),
    "na":                 ("N/A", "N/A"),
    "total_questions":    ("Total Questions", "Total Pertanyaan"),
    "completion_rate":    ("Completion Rate", "Tingkat Penyelesaian"),
    "area_breakdown":     ("Breakdown by Area", "Rincian per Area"),

    # ── Certification section ────────────────────────────────────────────────
    "next_step_title":    ("Next Step: Keep learning, get certified with a Credly badge",
                           "Langkah Selanjutnya: Terus belajar, dapatkan sertifikasi dengan lencana Credly"),
    "next_step_body":     ("Take your skills further with the official Siemens Solid Edge Certification and enhance your knowledge with free training via Siemens Xcelerator Academy.",
                           "Tingkatkan keterampilan Anda dengan Sertifikasi Siemens Solid Edge resmi dan tingkatkan pengetahuan Anda dengan pelatihan gratis melalui Siemens Xcelerator Academy."),
    "academy_title":      ("Xcelerator Academy Online Training", "Xcelerator Academy Online Training"),
    "academy_point_1":    ("On-demand, virtual, and in-person learning",
                           "Pembelajaran sesuai permintaan, virtual, dan tatap muka"),
    "academy_point_2":    ("Free access to Solid Edge self-paced training for education & community users",
                           "Akses gratis ke pelatihan Solid Edge mandiri untuk pengguna pendidikan & komunitas"),
    "start_learning":     ("Start Solid Edge Online Learning", "Mulai Pembelajaran Solid Edge Online"),
    "request_access":     ("Request Free Access Code", "Minta Kode Akses Gratis"),
    "cert_title":         ("Solid Edge Certification", "Solid Edge Certification"),
    "cert_free":          ("✅ 100% Free", "✅ 100% Free"),
    "cert_point_1":       ("Includes MCQs & 3D modeling", "Termasuk MCQ & pemodelan 3D"),
    "cert_point_2":       ("Earn a Credly digital badge recognized by employers",
                           "Dapatkan lencana digital Credly yang diakui oleh pemberi kerja"),
    "credly_blurb":       ("A Credly badge is a verified digital credential that showcases your certified skills, making your achievements visible and trusted by employers on platforms like LinkedIn, resumes, and portfolios.",
                           "Lencana Credly adalah kredensial digital terverifikasi yang menampilkan keterampilan bersertifikat Anda, membuat pencapaian Anda terlihat dan dipercaya oleh pemberi kerja di platform seperti LinkedIn, resume, dan portofolio."),
    "start_certification": ("Start Certification", "Mulai Sertifikasi"),
    "view_badges":        ("View Credly Badges", "Lihat Lencana Credly"),

    # ── Detailed results ─────────────────────────────────────────────────────
    "answer_label":       ("Answer:", "Jawaban:"),
    "remarks_label":      ("Remarks:", "Keterangan:"),

    # ── Footer ───────────────────────────────────────────────────────────────
    "download_report":    ("Download PDF Report", "Unduh Laporan PDF"),
    "another_assessment": ("Take Another Assessment", "Ambil Penilaian Lain"),
    "footer":             ("This assessment was completed using the Solid Edge Success Criteria Checklist tool.",
                           "Penilaian ini diselesaikan menggunakan alat Solid Edge Success Criteria Checklist."),

    # ── Access request modal ─────────────────────────────────────────────────
    "access_title":       ("✉️ Request Free Access Code", "✉️ Request Free Access Code"),
    "access_blurb":       ("We'll send you a free access code for Siemens Xcelerator Academy training.",
                           "Kami akan mengirimkan kode akses gratis untuk pelatihan Siemens Xcelerator Academy."),
    "email_address":      ("Email Address", "Alamat Email"),
    "email_placeholder":  ("Enter your email", "Masukkan email Anda"),
    "message_optional":   ("Message (Optional)", "Pesan (Opsional)"),
    "message_placeholder": ("Any additional information...", "Informasi tambahan..."),
    "cancel":             ("Cancel", "Batal"),
    "send_request":       ("Send Request", "Kirim Permintaan"),
    "sending":            ("Sending...", "Mengirim..."),

    # ── Reminder banner ──────────────────────────────────────────────────────
    "reminder_title":     ("Don't miss this opportunity!", "Jangan lewatkan kesempatan ini!"),
    "reminder_body":      ("Get certified and level up your CAD skills! You can come back anytime, or start now while it's fresh.",
                           "Dapatkan sertifikasi dan tingkatkan keterampilan CAD Anda! Anda dapat kembali kapan saja, atau mulai sekarang selagi masih segar."),
    "access_academy":     ("Access Academy", "Akses Academy"),
    "close":              ("×", "×"),

    # ── Notices ──────────────────────────────────────────────────────────────
    "export_failed":      ("Failed to download PDF. Please try again.",
                           "Failed to download PDF. Please try again."),
    "access_sent":        ("Thanks! We'll email your access code shortly.",
                           "Thanks! We'll email your access code shortly."),
    "access_failed":      ("Failed to submit request. Please try again.",
                           "Failed to submit request. Please try again."),
}

_LOCALE_INDEX = {"EN": 0, "ID": 1}

# Badge label per stored answer value; anything unrecognised shows as N/A
ANSWER_BADGE_KEYS = {"Yes": "yes", "No": "no"}


def t(key: str, locale: str = DEFAULT_LOCALE) -> str:
    return MESSAGES[key][_LOCALE_INDEX.get(locale, 0)]


def translator(locale: str):
    """Bind a locale once; returns a one-argument lookup."""
    idx = _LOCALE_INDEX.get(locale, 0)

    def _lookup(key: str) -> str:
        return MESSAGES[key][idx]

    return _lookup


def answer_badge_key(value: str) -> str:
    return ANSWER_BADGE_KEYS.get(value, "na")

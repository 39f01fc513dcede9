"""Thin wrappers around third-party SDKs (Twilio, xhtml2pdf, Supabase)."""

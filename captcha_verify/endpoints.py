"""Well-known siteverify endpoints. Any other URL string works as a custom endpoint."""

# reCAPTCHA v2 (checkbox and invisible) and v3
# https://developers.google.com/recaptcha/docs/verify
GOOGLE_RECAPTCHA = "https://www.google.com/recaptcha/api/siteverify"

# https://developers.cloudflare.com/turnstile/get-started/server-side-validation/
CLOUDFLARE_TURNSTILE = "https://challenges.cloudflare.com/turnstile/v0/siteverify"

# hCaptcha only reads form parameters; pair with RequestEncoding.FORM.
HCAPTCHA = "https://hcaptcha.com/siteverify"

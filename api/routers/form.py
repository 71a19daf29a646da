from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from routers.dosage import ANY_METHOD

router = APIRouter()

FORM_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>TRT Dosage Calculator</title>
<style>
  :root {
    --primary-color: #0056b3;
    --background-color: #f4f4f9;
    --text-color: #333333;
    --secondary-text: #666666;
    --border-radius: 8px;
  }
  * { box-sizing: border-box; margin: 0; padding: 0; }
  body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
    padding: 15px;
    background-color: var(--background-color);
    color: var(--text-color);
    display: flex;
    justify-content: center;
  }
  .container { width: 100%; max-width: 500px; }
  h1 { color: var(--primary-color); margin: 20px 0; text-align: center; }
  form, #result, .disclaimer {
    background: #ffffff;
    padding: 20px;
    border-radius: var(--border-radius);
    box-shadow: 0 4px 12px rgba(0,0,0,0.1);
    margin-bottom: 16px;
  }
  .form-group { margin-bottom: 16px; }
  label { display: block; color: var(--secondary-text); margin-bottom: 8px; }
  input[type="number"] {
    width: 100%;
    padding: 12px;
    border: 1px solid #ddd;
    border-radius: var(--border-radius);
    font-size: 1rem;
  }
  .divider { text-align: center; margin: 15px 0; color: var(--secondary-text); }
  button {
    width: 100%;
    padding: 14px;
    border: none;
    border-radius: var(--border-radius);
    background-color: var(--primary-color);
    color: #ffffff;
    font-size: 1rem;
    cursor: pointer;
  }
  #result { display: none; }
  .error { color: #b00020; }
  .disclaimer { font-size: 0.85rem; color: var(--secondary-text); }
</style>
</head>
<body>
<div class="container">
  <h1>TRT Dosage Calculator</h1>
  <form id="dosageForm" onsubmit="calculateDose(event)">
    <div class="form-group">
      <label for="targetWeeklyDose">Target Weekly Dose (mg)</label>
      <input type="number" id="targetWeeklyDose" value="100" min="0" max="1000" step="any" required>
    </div>
    <div class="form-group">
      <label for="testosteroneStrength">Testosterone Strength (mg/ml)</label>
      <input type="number" id="testosteroneStrength" value="200" min="0" max="500" step="any" required>
    </div>
    <div class="divider">Choose one option below</div>
    <div class="form-group">
      <label for="shotsPerWeek">Number of Shots per Week</label>
      <input type="number" id="shotsPerWeek" min="0" max="7" step="any" placeholder="e.g., 2">
    </div>
    <div class="form-group">
      <label for="shotEveryXDays">OR Shot Every X Days</label>
      <input type="number" id="shotEveryXDays" min="0" max="30" step="0.1" placeholder="e.g., 3.5">
    </div>
    <button type="submit">Calculate Dose</button>
  </form>

  <div id="result"></div>

  <div class="disclaimer">
    <strong>Medical Disclaimer:</strong> This calculator is for informational purposes only
    and is not a substitute for professional medical advice. Always follow the dosing
    instructions of your healthcare provider. 1 ml = 1 cc; a 1 cc insulin syringe with
    0.1 ml markings makes measuring fractions of a ml easier.
  </div>
</div>

<script>
const fields = ['targetWeeklyDose', 'testosteroneStrength', 'shotsPerWeek', 'shotEveryXDays'];

async function calculateDose(event) {
  event.preventDefault();
  const body = {};
  for (const id of fields) {
    const value = document.getElementById(id).value;
    if (value !== '') {
      body[id] = parseFloat(value);
    }
  }

  const resultEl = document.getElementById('result');
  resultEl.style.display = 'block';
  resultEl.innerText = 'Calculating...';

  try {
    const response = await fetch('/api/v1/calculate', {
      method: 'POST',
      headers: { 'Content-Type': 'application/json' },
      body: JSON.stringify(body),
    });
    const data = await response.json();
    if (!response.ok) {
      resultEl.innerHTML = '<span class="error"></span>';
      resultEl.firstChild.innerText = data.error;
      return;
    }
    resultEl.innerHTML =
      '<p><strong>Dose per Shot:</strong> ' + data.dosePerShotMl + ' ml (' + data.dosePerShotMg + ' mg)</p>' +
      '<p><strong>Frequency:</strong> ' + data.frequency + ' (' + data.shotsPerWeek + ' shots/week)</p>';
  } catch (error) {
    resultEl.innerText = 'Error calculating dosage. Please try again.';
  }
}

// Clear one frequency field when the other is used
document.getElementById('shotsPerWeek').addEventListener('input', function () {
  if (this.value) document.getElementById('shotEveryXDays').value = '';
});
document.getElementById('shotEveryXDays').addEventListener('input', function () {
  if (this.value) document.getElementById('shotsPerWeek').value = '';
});
</script>
</body>
</html>
"""


@router.api_route("/", methods=ANY_METHOD, response_class=HTMLResponse)
async def serve_form():
    """Calculator form page, served for any method."""
    return HTMLResponse(FORM_PAGE)

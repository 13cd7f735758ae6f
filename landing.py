LANDING_PAGE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>AI Indigo API - x402 Payments</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      background: linear-gradient(135deg, #1a1a2e 0%, #16213e 100%);
      color: #fff;
      min-height: 100vh;
      padding: 2rem;
    }
    .container { max-width: 800px; margin: 0 auto; }
    h1 { font-size: 2.5rem; margin-bottom: 0.5rem; }
    .subtitle { color: #888; font-size: 1.2rem; margin-bottom: 2rem; }
    .price-badge {
      display: inline-block;
      background: #00d4aa;
      color: #000;
      padding: 0.5rem 1rem;
      border-radius: 2rem;
      font-weight: bold;
      margin-bottom: 2rem;
    }
    .section { background: rgba(255,255,255,0.05); padding: 1.5rem; border-radius: 1rem; margin-bottom: 1.5rem; }
    h2 { font-size: 1.3rem; margin-bottom: 1rem; color: #00d4aa; }
    pre { background: #000; padding: 1rem; border-radius: 0.5rem; overflow-x: auto; font-size: 0.9rem; }
    code { color: #00d4aa; }
    .endpoint { color: #fff; background: #333; padding: 0.3rem 0.6rem; border-radius: 0.3rem; font-family: monospace; }
    ul, ol { padding-left: 1.5rem; }
    li { margin: 0.5rem 0; }
    a { color: #00d4aa; }
    .footer { margin-top: 3rem; text-align: center; color: #666; }
  </style>
</head>
<body>
  <div class="container">
    <h1>AI Indigo API</h1>
    <p class="subtitle">880+ AI tools. Search programmatically. Pay with x402.</p>

    <div class="price-badge">$0.01 USDC per query</div>

    <div class="section" id="how-it-works">
      <h2>How it works</h2>
      <ol>
        <li>Send a GET request to <span class="endpoint">/api/tools?q=your+query</span></li>
        <li>Receive HTTP 402 with payment requirements</li>
        <li>Pay via x402 (USDC on Base)</li>
        <li>Retry with the <code>X-PAYMENT</code> header to get your search results</li>
      </ol>
    </div>

    <div class="section" id="endpoints">
      <h2>Endpoints</h2>
      <ul>
        <li><span class="endpoint">GET /</span> This page</li>
        <li><span class="endpoint">GET /api/tools?q=query</span> Search tools (x402)</li>
        <li><span class="endpoint">GET /api/categories</span> List categories (free)</li>
        <li><span class="endpoint">GET /health</span> Health check (free)</li>
      </ul>
    </div>

    <div class="section" id="example">
      <h2>Example</h2>
      <pre><code>curl https://pay.aiindigo.com/api/tools?q=chatbot

# Returns 402 with x402 payment requirements
# Pay via x402, then retry with X-PAYMENT to get results</code></pre>
    </div>

    <div class="section" id="agents">
      <h2>For AI Agents</h2>
      <p>This API is designed for autonomous AI agents. No API keys needed: just pay and query.</p>
      <p style="margin-top: 1rem;">Built on <a href="https://x402.org" target="_blank">x402 protocol</a> using <a href="https://openfacilitator.io" target="_blank">OpenFacilitator</a>.</p>
    </div>

    <div class="footer">
      <p><a href="https://aiindigo.com">aiindigo.com</a> AI tools directory</p>
    </div>
  </div>
</body>
</html>
"""
